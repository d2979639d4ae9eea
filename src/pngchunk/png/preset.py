import logging

from pngchunk.kernel.preset import preset

png = preset(logger=logging.getLogger('pngchunk.png'))
