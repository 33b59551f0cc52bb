"""Пакетная обработка: рамка и подпись для одного JPEG или целой папки."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from framer.config import get_config
from framer.logging_setup import configure_logging
from framer.models.color import RGBA, parse_hex_color
from framer.models.frame_settings import STYLE_PRESETS, BorderStyle, FrameSettings
from framer.models.image_model import SourceImage
from framer.services.compositor_service import CompositorService
from framer.services.font_service import FontService
from framer.services.image_service import ImageService
from framer.services.process_service import ProcessService

logger = logging.getLogger(__name__)

JPEG_SUFFIXES = (".jpg", ".jpeg")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="framer-cli", description="Рамка и подпись для фотографий.")
    parser.add_argument("-i", "--input", help="JPEG-файл или папка с JPEG-файлами")
    parser.add_argument("-o", "--output", help="Папка для готовых изображений")
    parser.add_argument("-s", "--border-style", default="solid", help="'solid' или 'instagram' (4:5, 1080x1350)")
    parser.add_argument("-t", "--border-thickness", help="Толщина рамки в px или в процентах, например '10%%'")
    parser.add_argument("--border-color", default="#000000", help="Цвет рамки, HEX")
    parser.add_argument("--caption", default="", help="Подпись; если пусто, берётся дата съёмки из EXIF")
    parser.add_argument("--no-date", action="store_true", help="Не подписывать фото датой съёмки")
    parser.add_argument("--font-name", default=None, help="Шрифт подписи")
    parser.add_argument("--font-size", type=int, default=None, help="Размер шрифта, px")
    parser.add_argument("--font-color", default="#000000", help="Цвет подписи, HEX")
    parser.add_argument("--instagram-max-size", type=int, default=None, help="Предельный размер фото для instagram")
    parser.add_argument("--padding", type=int, default=None, help="Белый отступ, px")
    parser.add_argument("--list-fonts", action="store_true", help="Показать доступные шрифты и выйти")
    parser.add_argument("--log-level", default=None, help="Уровень логирования (DEBUG, INFO, ...)")
    return parser


def parse_style(value: str) -> BorderStyle:
    try:
        return BorderStyle(value.lower())
    except ValueError:
        logger.warning("Unknown border style %s. Using solid border.", value)
        return BorderStyle.SOLID


def parse_thickness(value: Optional[str], image_size: tuple[int, int], default: int) -> int:
    """Толщина в px; значение с '%' считается от меньшей стороны фото."""
    if not value:
        return default
    value = value.strip()
    if value.endswith("%"):
        percent = float(value[:-1])
        return int(min(image_size) * percent / 100.0)
    return int(value)


def settings_for(
    args: argparse.Namespace,
    source: SourceImage,
    default_font: str,
    border_color: RGBA,
    font_color: RGBA,
) -> FrameSettings:
    style = parse_style(args.border_style)
    preset = STYLE_PRESETS[style]
    return FrameSettings(
        style=style,
        thickness=parse_thickness(args.border_thickness, source.size, preset.thickness),
        border_color=border_color,
        padding=preset.padding if args.padding is None else args.padding,
        caption=args.caption,
        use_capture_date=not args.no_date,
        font_size=args.font_size or preset.font_size,
        font_color=font_color,
        font_name=args.font_name or default_font,
        max_size=args.instagram_max_size or preset.max_size,
    )


def iter_inputs(input_path: Path) -> Iterable[Path]:
    if input_path.is_dir():
        for path in sorted(input_path.rglob("*")):
            if path.is_file() and path.suffix.lower() in JPEG_SUFFIXES:
                yield path
    else:
        yield input_path


def output_name(path: Path, style: BorderStyle) -> str:
    suffix = "_instagram" if style is BorderStyle.INSTAGRAM else "_framed"
    return f"{path.stem}{suffix}.jpg"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()
    configure_logging(args.log_level or config.log_level)

    fonts = FontService(config.fonts_dir)
    if args.list_fonts:
        print("Available fonts:")
        for name in fonts.available_fonts():
            print(f"  - {name}")
        return 0

    if not args.input or not args.output:
        parser.print_usage(sys.stderr)
        print("Input and output paths are required", file=sys.stderr)
        return 2

    try:
        border_color = parse_hex_color(args.border_color)
        font_color = parse_hex_color(args.font_color)
    except ValueError as exc:
        logger.error("Invalid color: %s", exc)
        return 2

    input_path = Path(args.input)
    if not input_path.exists():
        logger.error("Error accessing input path: %s", input_path)
        return 2
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    images = ImageService()
    processor = ProcessService(compositor_service=CompositorService(fonts))
    failed: List[Path] = []
    for path in iter_inputs(input_path):
        try:
            source = images.load_image(path)
            settings = settings_for(args, source, config.default_font, border_color, font_color)
            composed = processor.process(source, settings)
            out_path = output_dir / output_name(path, settings.style)
            composed.image.convert("RGB").save(out_path, "JPEG", quality=config.jpeg_quality)
        except (OSError, ValueError) as exc:
            logger.error("Error processing %s: %s", path, exc)
            failed.append(path)
            continue
        print(f"Processed '{path}' -> '{out_path}'")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
