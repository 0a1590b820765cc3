"""Global constants for the application."""

# Canvas settings
CANVAS_SIZE = 250  # Logical width/height of every exported spinner
DEFAULT_FILL_COLOR = "#000000"  # Fallback when no color is configured

# Document-level definition ids
GRADIENT_ID = "spinner-gradient"
SHADOW_FILTER_ID = "spinner-shadow"

# Gradient stop limits
MIN_GRADIENT_STOPS = 2
MAX_GRADIENT_STOPS = 10

# Variation settings
UNEVEN_RADIUS_AMPLITUDE = 0.2  # Fraction of radius used by the uneven ripple
UNEVEN_RADIUS_LOBES = 2  # Full sine periods per revolution (four lobes)
RANDOM_RADIUS_MIN = 0.8  # Lower bound of random radius factors
RANDOM_RADIUS_SPAN = 0.4  # Factors are drawn from [min, min + span)
MIN_SIZE_FRACTION = 0.25  # Smallest element in a size sweep, relative to size

# Shape settings
HEART_UNIT = 0.08  # Heart path unit relative to element size
STAR_POINTS = 10  # Alternating outer/inner vertices

# Animation settings
WAVE_LIFT = 20  # Units an element rises at the top of a wave
DISTORT_SQUARE_RX = 15  # Corner radius squares reach while distorting

# Timeline script settings
GSAP_CDN_URL = "https://cdnjs.cloudflare.com/ajax/libs/gsap/3.12.2/gsap.min.js"
GSAP_DEFAULT_EASE = "power1.inOut"

# Raster preview resolutions (pixels per side)
PREVIEW_QUALITY = {
    "low": 300,
    "medium": 500,
    "high": 800,
}
DEFAULT_PREVIEW_BACKGROUND = "#111827"
