#!/usr/bin/env python3
"""Spaces Uploader - エントリーポイント"""
import argparse
import sys

from spaces_uploader import SpacesUploader, UploadError


def parse_args(argv=None):
    """コマンドライン引数を解析"""
    parser = argparse.ArgumentParser(
        description="Upload build output to a DigitalOcean Spaces bucket"
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.json",
        help="Path to the JSON configuration file (default: config.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """メイン関数"""
    args = parse_args(argv)

    try:
        uploader = SpacesUploader(args.config, verbose=args.verbose)
        uploader.run()
        return 0

    except UploadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
