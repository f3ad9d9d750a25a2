"""Command that hashes one image and prints the hash in hexadecimal."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from PIL import Image

from perceptual_hash.hasher import HasherConfig


def main(argv: Sequence[str] | None = None) -> int:
    """Hash the image named on the command line and print ``<path>: <hex>``."""
    parser = argparse.ArgumentParser(
        prog="hash_image", description="Hash an image and print the hash value."
    )
    parser.add_argument("path", help="image file to hash")
    args = parser.parse_args(argv)

    try:
        with Image.open(args.path) as opened:
            opened.load()
            image = opened.copy()
    except (OSError, ValueError) as error:
        print(f"failed to open {args.path}: {error}", file=sys.stderr)
        return 1

    digest = HasherConfig().hash_size(8, 8).to_hasher().hash_image(image)
    print(f"{args.path}: {digest.as_bytes().hex()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())