# xgen_clip2html/core/processor/rtf_helper/rtf_constants.py
"""
RTF Constants

Constants used for locating and classifying RTF image groups.
"""

# Groups removed before image extraction:
# headers/footers (\header, \headerl, \headerr, \headerf, same for footer),
# non-Word pictures (\nonshppict) and drawn shape results (\shprslt).
EXCLUDED_GROUP_PATTERN = r'(?:(?:header|footer)[lrf]?|nonshppict|shprslt)'

# Image group name
PICT_GROUP_NAME = 'pict'

# Image id markers (blip uid first, blip tag as fallback)
BLIP_UID_PATTERN = r'\\blipuid (\w+)\}'
BLIP_TAG_PATTERN = r'\\bliptag(-?\d+)'

# Image type markers, checked in order (first match wins)
IMAGE_TYPE_MARKERS = [
    (r'\\pngblip', 'png'),
    (r'\\jpegblip', 'jpeg'),
    (r'\\emfblip', 'emf'),
    (r'\\wmetafile\d', 'wmf'),
]

# WordArt shapes are defined with \defshp
WORDART_MARKER = '\\defshp'

# Horizontal lines pasted as pictures
HORIZONTAL_RULE_MARKER = 'fHorizRule'

# Codepage to encoding mapping
CODEPAGE_ENCODING_MAP = {
    437: 'cp437',
    850: 'cp850',
    852: 'cp852',
    866: 'cp866',
    874: 'cp874',
    932: 'cp932',     # Japanese
    936: 'gb2312',    # Simplified Chinese
    949: 'cp949',     # Korean
    950: 'big5',      # Traditional Chinese
    1250: 'cp1250',   # Central European
    1251: 'cp1251',   # Cyrillic
    1252: 'cp1252',   # Western European
    1253: 'cp1253',   # Greek
    1254: 'cp1254',   # Turkish
    1255: 'cp1255',   # Hebrew
    1256: 'cp1256',   # Arabic
    1257: 'cp1257',   # Baltic
    1258: 'cp1258',   # Vietnamese
    10000: 'mac_roman',
    65001: 'utf-8',
}

# Default encodings to try
DEFAULT_ENCODINGS = ['utf-8', 'cp1252', 'cp949']


__all__ = [
    'EXCLUDED_GROUP_PATTERN',
    'PICT_GROUP_NAME',
    'BLIP_UID_PATTERN',
    'BLIP_TAG_PATTERN',
    'IMAGE_TYPE_MARKERS',
    'WORDART_MARKER',
    'HORIZONTAL_RULE_MARKER',
    'CODEPAGE_ENCODING_MAP',
    'DEFAULT_ENCODINGS',
]
