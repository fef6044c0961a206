#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
File Converter CLI - Convert text to documents and shrink images

Usage:
    file-converter convert --input notes.txt --format pdf
    file-converter convert --paste "Hello world" --format docx -o hello.docx
    file-converter resize --input photo.png --target-kb 80
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from config.logging_config import get_logger
from converter.exceptions import ConverterError
from converter.renderers import normalize_format
from converter.service import ConversionOutput, ConversionService

logger = get_logger(__name__)

FORMAT_CHOICES = ['pdf', 'docx', 'csv']


def format_size(size: int) -> str:
    """Format a byte count for display"""
    if size < 1024:
        return f"{size} B"
    return f"{size / 1024:.1f} KB"


def write_output(output: ConversionOutput, target: Optional[str], service: ConversionService) -> Path:
    """Write output to target, or to the configured output directory"""
    if target:
        path = Path(target)
    else:
        path = Path(service.settings.output_dir) / output.filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(output.content)
    return path.resolve()


def cmd_convert(args, service: ConversionService) -> int:
    """Convert pasted or uploaded text"""
    if args.input:
        input_file = Path(args.input)
        if not input_file.exists():
            print(f"❌ Input file not found: {input_file}")
            return 1
        text = input_file.read_bytes().decode('utf-8', errors='replace')
    elif args.paste is not None:
        text = args.paste
    else:
        print("❌ No text provided (use --input or --paste)")
        return 1

    output = service.convert_text(text, args.format)
    path = write_output(output, args.output, service)
    print(f"✅ Wrote {normalize_format(args.format or service.settings.default_format)} "
          f"({format_size(output.size)}) to {path}")
    return 0


def cmd_resize(args, service: ConversionService) -> int:
    """Re-encode an image within a target size"""
    input_file = Path(args.input)
    if not input_file.exists():
        print(f"❌ Input file not found: {input_file}")
        return 1

    output, result = service.resize_image(input_file.read_bytes(), args.target_kb)
    path = write_output(output, args.output, service)

    attempt = result.attempt
    width = f", width {attempt.width}px" if attempt.width else ""
    print(f"✅ Wrote {format_size(output.size)} JPEG (quality {attempt.quality}{width}) to {path}")
    if not result.within_target:
        print(f"⚠️  Could not reach {format_size(result.constraint.max_bytes)}; "
              f"kept the smallest result")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='file-converter',
        description="Convert text to PDF/DOCX/CSV and resize images to a target size",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Convert command
    convert_parser = subparsers.add_parser('convert', help='Convert text to a document')
    source = convert_parser.add_mutually_exclusive_group()
    source.add_argument('--input', '-i', help='UTF-8 text file')
    source.add_argument('--paste', '-p', help='Text to convert')
    convert_parser.add_argument('--format', '-f', type=str.lower, choices=FORMAT_CHOICES,
                                help='Output format (default: from settings)')
    convert_parser.add_argument('--output', '-o', help='Output file path')

    # Resize command
    resize_parser = subparsers.add_parser('resize', help='Shrink an image to a target size')
    resize_parser.add_argument('--input', '-i', required=True, help='Image file')
    resize_parser.add_argument('--target-kb', '-t', type=int, help='Target size in KB (clamped)')
    resize_parser.add_argument('--output', '-o', help='Output file path')

    return parser


def main(argv: Optional[List[str]] = None, service: Optional[ConversionService] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    commands = {
        'convert': cmd_convert,
        'resize': cmd_resize,
    }

    try:
        service = service or ConversionService()
        return commands[args.command](args, service)
    except ConverterError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
