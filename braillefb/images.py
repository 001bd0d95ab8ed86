import imageio.v2 as iio
import logging
import numpy as np


logger = logging.getLogger(__name__)


READ_PARAMS = {'mode': 'L'}


def preprocess_image(img: np.array, threshold: int = 0) -> np.array:
    """
    Dark pixels (at or below threshold) are the ones that get drawn
    """
    return np.squeeze(img <= threshold).astype(np.uint8)


def load_pixels(fname: str, threshold: int = 0) -> np.array:
    img = iio.imread(fname, **READ_PARAMS)
    data = preprocess_image(img, threshold)
    if data.ndim != 2:
        raise ValueError(f'Expected a single grayscale frame in {fname}, got shape {data.shape}')
    height, width = data.shape
    logger.info(f'Read image from {fname} - size {width}x{height}')
    return data
