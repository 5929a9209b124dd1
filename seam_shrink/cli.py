import argparse
import logging
import sys
import time

from . import carve
from .energy import compute_energy, energy_to_image
from .image_io import load_grid, save_grid

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(message)s',
        stream=sys.stdout,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seam-shrink',
        description='Shrink an image by removing low-energy seams.')
    parser.add_argument('-in', dest='src', type=str, required=True,
                        help='source image')
    parser.add_argument('-out', dest='dst', type=str, required=True,
                        help='output image')
    parser.add_argument('-width', dest='width', type=int, default=0,
                        help='number of vertical seams to remove')
    parser.add_argument('-height', dest='height', type=int, default=0,
                        help='number of horizontal seams to remove')
    parser.add_argument('--order', type=str, default=carve.WIDTH_FIRST,
                        choices=carve.VALID_ORDERS)
    parser.add_argument('--energy-out', dest='energy_out', type=str,
                        default=None,
                        help='also save the energy map of the source image')
    parser.add_argument('--log-level', dest='log_level', type=str,
                        default='info',
                        choices=['debug', 'info', 'warning', 'error'])
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    try:
        grid = load_grid(args.src)

        if args.energy_out is not None:
            energy = compute_energy(grid.pixels, grid.width, grid.height)
            save_grid(energy_to_image(energy), args.energy_out)

        logger.info('Performing seam carving...')
        start = time.time()
        dst = carve.resize(grid, args.width, args.height, args.order)
        logger.info('Done at %.4f second(s)', time.time() - start)

        save_grid(dst, args.dst)
    except Exception as e:
        logger.error(e)
        return 1
    return 0
