"""Render an animated GIF preview of a story tray border."""
import argparse
import os
import sys
from PIL import Image, ImageDraw

from storytray.config import (GIF_SIZE, GIF_FRAMES, GIF_OUTPUT, BORDER_GRADIENT_COLORS,
                    STROKE_WIDTH, SPACE_LENGTH, ANIMATION_DURATION_MS)
from storytray.controllers.rotation_animator import phase_at
from storytray.models.ring import Segment
from storytray.utils.arc_layout import layout
from storytray.utils.colors import sweep_color_at, compute_faded_colors
from storytray.utils.error_manager import ErrorManager, InvalidConfiguration, render_error, ErrorSeverity

background_color = (255, 255, 255, 0)  # Transparent background


def border_slices(segments, step=1.0):
    """
    Split segments into short arcs so each one can get its own gradient color.

    Anything past a full turn would be painted over itself, so a segment is
    cut at 360 degrees of sweep.
    """
    for segment in segments:
        start = segment.start_degree
        end = start + min(segment.sweep_degree, 360)
        while start < end:
            stop = min(start + step, end)
            yield start, stop
            start = stop


def render_frame(size, stroke_width, segments, colors, stops=None, phase=0.0, scale=4):
    """
    Draw one frame of the border.

    The frame is drawn `scale` times larger and shrunk afterwards to smooth
    the edges.
    """
    big = size * scale
    img = Image.new('RGBA', (big, big), background_color)
    draw = ImageDraw.Draw(img)

    width = max(1, int(round(stroke_width * scale)))
    inset = width / 2
    bbox = [inset, inset, big - 1 - inset, big - 1 - inset]
    rotation = phase * 360

    for start, stop in border_slices(segments):
        middle = (start + stop) / 2
        t = ((middle - rotation) / 360) % 1.0
        # Overlap slices slightly so no seams show between them
        draw.arc(bbox, start, stop + 0.5, fill=sweep_color_at(colors, stops, t), width=width)

    return img.resize((size, size), Image.Resampling.LANCZOS)


def render_frames(size=GIF_SIZE, frames=GIF_FRAMES, stories=None, space=SPACE_LENGTH,
                  stroke_width=STROKE_WIDTH, colors=None, stops=None,
                  duration_ms=ANIMATION_DURATION_MS, loading=False):
    """
    Render one animation cycle.

    Without stories (or with a single one) the border is one continuous ring.
    """
    if frames < 1:
        raise InvalidConfiguration(f"frames must be at least 1, got {frames}")
    if size < 1:
        raise InvalidConfiguration(f"size must be at least 1, got {size}")
    if stroke_width <= 0 or stroke_width * 2 >= size:
        raise InvalidConfiguration(f"stroke_width must be positive and fit a {size}px tray, got {stroke_width}")
    colors = list(BORDER_GRADIENT_COLORS if colors is None else colors)
    if loading:
        colors = compute_faded_colors(colors)

    if stories is None or stories == 1:
        segments = [Segment(0, 360)]
    else:
        segments = layout(stories, space)

    images = []
    for i in range(frames):
        phase = phase_at(i * duration_ms / frames, duration_ms)
        images.append(render_frame(size, stroke_width, segments, colors, stops, phase))
    return images


def save_gif(images, output, frame_ms):
    """Write frames as a looping GIF"""
    directory = os.path.dirname(output)
    if directory:
        os.makedirs(directory, exist_ok=True)

    images[0].save(
        output,
        save_all=True,
        append_images=images[1:],
        optimize=False,
        duration=frame_ms,
        loop=0,  # infinite loop
        disposal=2,
    )
    return output


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--stories', type=int, default=None, help="number of story arcs (default: continuous ring)")
    parser.add_argument('--space', type=float, default=SPACE_LENGTH, help="gap between arcs in degrees")
    parser.add_argument('--frames', type=int, default=GIF_FRAMES)
    parser.add_argument('--size', type=int, default=GIF_SIZE, help="output width and height in pixels")
    parser.add_argument('--stroke', type=float, default=STROKE_WIDTH * 2, help="stroke width in pixels")
    parser.add_argument('--duration', type=int, default=ANIMATION_DURATION_MS, help="one rotation in ms")
    parser.add_argument('--loading', action='store_true', help="use the faded loading colors")
    parser.add_argument('--output', default=GIF_OUTPUT)
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    ErrorManager()

    try:
        images = render_frames(
            size=args.size,
            frames=args.frames,
            stories=args.stories,
            space=args.space,
            stroke_width=args.stroke,
            duration_ms=args.duration,
            loading=args.loading,
        )
        output = save_gif(images, args.output, max(1, args.duration // args.frames))
    except InvalidConfiguration as e:
        render_error("Invalid tray preview settings", ErrorSeverity.HIGH, error=e)
        return 2
    except OSError as e:
        render_error(f"Could not write {args.output}", ErrorSeverity.HIGH, error=e)
        return 1

    print(f"Story tray GIF created successfully at {output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
