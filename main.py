import argparse
import json
import logging
import numpy as np
import sys

from enum import Enum
from typing import Dict, List, Optional

from braillefb import Framebuffer
from braillefb.demos import DEMOS
from braillefb.images import load_pixels


logger = logging.getLogger(__name__)


CONFIG_FILE = 'config.json'
LOG_FILE = 'log.txt'


class OutputMode(Enum):
    ROW_BY_ROW = 'row-by-row'
    ALL_AT_ONCE = 'all-at-once'


def merge_args_into_config(config: Dict, args: argparse.Namespace):
    if args.image is not None:
        config['source'] = {'type': 'image', 'filename': args.image}
    elif args.demo is not None:
        config['source'] = {'type': 'demo', 'name': args.demo}
    if args.size is not None:
        config['size'] = list(args.size)
    if args.mode is not None:
        config['output']['mode'] = args.mode
    if args.inverse:
        config['output']['inverse'] = True
    config['debug'] = args.debug
    return config


def load_frame(config: Dict) -> np.array:
    source = config['source']
    if source['type'] == 'image':
        return load_pixels(source['filename'], source.get('threshold', 0))
    if source['type'] != 'demo':
        raise ValueError(f"Unsupported source type: {source['type']}")

    name = source['name']
    if name not in DEMOS:
        raise ValueError(f'Unsupported demo: {name}')
    if name == 'basic':
        return DEMOS[name]()
    width, height = config['size']
    if name == 'mandelbrot':
        return DEMOS[name](width, height, **config['mandelbrot'])
    return DEMOS[name](width, height)


def render(frame: np.array, output_config: Dict) -> str:
    if output_config.get('inverse', False):
        frame = np.logical_not(frame).astype(np.uint8)
    framebuffer = Framebuffer.from_array(frame)
    logger.info(f'Rendering {framebuffer!r}')

    mode = output_config['mode']
    if mode == OutputMode.ALL_AT_ONCE.value:
        return framebuffer.render()
    elif mode == OutputMode.ROW_BY_ROW.value:
        return ''.join(f'{row}\n' for row in framebuffer.rows())
    raise ValueError(f'Unsupported output mode: {mode}')


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Render a bitmap as braille text')
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--demo', type=str, choices=sorted(DEMOS))
    source.add_argument('--image', type=str)
    parser.add_argument('--size', type=int, nargs=2, metavar=('WIDTH', 'HEIGHT'))
    parser.add_argument('--mode', type=str, choices=[m.value for m in OutputMode])
    parser.add_argument('--inverse', action='store_true')
    parser.add_argument('--debug', action='store_true')
    parser.add_argument('--config-file', type=str, default=CONFIG_FILE)
    parser.add_argument('--log-file', type=str, default=LOG_FILE)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='[%(levelname)s] %(filename)s:%(lineno)s - %(message)s',
                        filemode='w', filename=args.log_file)

    with open(args.config_file, 'r') as f:
        config = json.load(f)
    config = merge_args_into_config(config, args)

    config_str = json.dumps(config, indent=4)
    logger.info(f'Rendering with the following config:\n{config_str}')

    frame = load_frame(config)
    print(render(frame, config['output']), end='')


if __name__ == "__main__":
    main()
