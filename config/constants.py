"""
Centralized constants for File Converter.
All magic numbers of the layout engine and the image encoder live here.
"""

# ===========================================
# TEXT LAYOUT
# ===========================================
LAYOUT_FONT_SIZE = 12                 # points
LAYOUT_MARGIN = 40                    # points, applied on all four sides
LAYOUT_LEADING_RATIO = 1.4            # line height = font size * ratio
LAYOUT_PAGE_SIZE = 'letter'           # 612 x 792 points
LAYOUT_DEFAULT_FONT = 'Helvetica'     # built-in Type 1 font (Latin-1 only)
LAYOUT_PLACEHOLDER = ' '              # line emitted for blank paragraphs

# Unicode TrueType fonts tried, in order, when no font file is configured
UNICODE_FONT_CANDIDATES = [
    '/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf',             # Debian, Ubuntu
    '/usr/share/fonts/dejavu/DejaVuSans.ttf',                      # Fedora, Arch
    '/usr/share/fonts/TTF/DejaVuSans.ttf',
    '/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf',
    '/usr/share/fonts/liberation/LiberationSans-Regular.ttf',
    '/Library/Fonts/Arial Unicode.ttf',                             # macOS
    '/System/Library/Fonts/Supplemental/Arial Unicode.ttf',
    'C:/Windows/Fonts/arial.ttf',
]

# ===========================================
# IMAGE ENCODING
# ===========================================
ENCODER_START_QUALITY = 80
ENCODER_QUALITY_STEP = 10
ENCODER_QUALITY_FLOOR = 20            # last quality tried
ENCODER_SCALE_FACTOR = 0.9            # width multiplier per resize step
ENCODER_MIN_WIDTH = 100               # pixels, resize stops at or below this
ENCODER_FALLBACK_WIDTH = 1000         # used when metadata has no width

# ===========================================
# TARGET SIZE (kilobytes, 1 KB = 1024 bytes)
# ===========================================
TARGET_KB_DEFAULT = 100
TARGET_KB_MIN = 20
TARGET_KB_MAX = 100

# ===========================================
# OUTPUT
# ===========================================
DEFAULT_FORMAT = 'pdf'
OUTPUT_DIR = 'data/output'
IMAGE_OUTPUT_NAME = 'resized.jpg'
IMAGE_MEDIA_TYPE = 'image/jpeg'
DOCUMENT_CREATOR = 'File Converter'
DOCUMENT_TITLE = 'Converted Document'
DOCUMENT_DESCRIPTION = 'Generated from plain text'

# ===========================================
# LOGGING
# ===========================================
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE = 'logs/converter.log'
LOG_MAX_SIZE_MB = 10
LOG_BACKUP_COUNT = 5
