"""
Fixed parameters for the encode and clean steps.

The encode produces VP9 with a YUVA 4:2:0 pixel format so the alpha channel
survives. Alternate reference frames are disabled because libvpx drops alpha
when they are enabled.
"""

# --- Executables ---
FFMPEG_BIN = "ffmpeg"
MKCLEAN_BIN = "mkclean"

# --- Encoder Settings ---
VIDEO_CODEC = "libvpx-vp9"
VIDEO_BITRATE = "25M"
PIXEL_FORMAT = "yuva420p"
ALPHA_METADATA_STREAM = "s:v:0"
ALPHA_METADATA = "alpha_mode=1"
AUTO_ALT_REF = "0"

# --- Cleaner Settings ---
MKCLEAN_DOCTYPE = "4"
MKCLEAN_FLAGS = ("--doctype", MKCLEAN_DOCTYPE, "--keep-cues", "--optimize")

# --- Output Naming ---
TARGET_SUFFIX = ".webm"
# mkclean writes its output next to the input under this prefix.
CLEAN_PREFIX = "clean."

# --- Progress Display ---
SUCCESS_SYMBOL = "✅"
FAILURE_SYMBOL = "❌"
PHASE_ENCODING = "Encoding"
PHASE_CLEANING = "Cleaning"
PHASE_RENAMING = "Renaming"
