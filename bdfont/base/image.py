"""
bdfont.base.image - convert pixel matrices to images

(c) 2019--2024 Rob Hagemans
licence: https://opensource.org/licenses/MIT
"""


try:
    from PIL import Image
except ImportError:
    Image = None


def to_image(matrix, scale=1, paper=(0, 0, 0), ink=(255, 255, 255)):
    """Convert matrix of booleans to RGB image, optionally scaled up."""
    if not Image:
        raise ImportError('Converting to image requires PIL module.')
    height = len(matrix)
    width = len(matrix[0]) if height else 0
    img = Image.new('RGB', (width, height), paper)
    img.putdata([ink if _pix else paper for _row in matrix for _pix in _row])
    if scale != 1 and width and height:
        img = img.resize(
            (width * scale, height * scale), Image.Resampling.NEAREST
        )
    return img
