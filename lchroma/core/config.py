#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula

# Symbolic contrast thresholds accepted wherever a ratio is expected
WCAG_ALIASES = {
    "AA": WCAG_AA_NORMAL,
    "AALG": WCAG_AA_LARGE,
    "AAA": WCAG_AAA_NORMAL,
    "AAALG": WCAG_AAA_LARGE,
}
DEFAULT_CONTRAST_THRESHOLD = WCAG_AA_NORMAL

# Luma below which a base color is treated as dark (stretch towards white)
DARK_LUMA_THRESHOLD = 0.18

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
PERCENT_TO_FACTOR = 100.0          # Divisor to convert percentage values to decimal factors
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle degrees
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_BLUE_SECTOR = 4.0              # Sector offset when blue is the largest HSL channel
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
EXP_2 = 2                          # Square power

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space
XYZ_SCALING = 100.0                # Factor for scaling XYZ and linear channels to 0-100

# sRGB to XYZ Matrix (Source: sRGB D65, 4-digit form)
M_SRGB_XYZ_X = (0.4124, 0.3576, 0.1805)    # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126, 0.7152, 0.0722)    # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193, 0.1192, 0.9505)    # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse, 4-digit form)
M_XYZ_SRGB_R = (3.2406, -1.5372, -0.4986)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9689, 1.8758, 0.0415)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0557, -0.2040, 1.0570)   # Coefficients for linear Blue component calculation

# XYZ D65 Reference White, scaled 0-100 (row sums of M_SRGB_XYZ)
D65_X = 95.05                      # X coordinate for D65 illuminant
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.9                      # Z coordinate for D65 illuminant
WHITE_POINT = (D65_X, D65_Y, D65_Z)

# CIELAB Constants (Source: CIE 15:2004, exact rational form)
LAB_E = 216.0 / 24389.0            # (6/29)^3, breakpoint between linear and cube-root segments
LAB_INV_THR = 6.0 / 29.0           # Breakpoint for inverse conversion (Lab to XYZ)
LAB_K = 841.0 / 108.0              # Slope of the linear segment for low luminance values
LAB_OFFSET = 4.0 / 29.0            # Constant offset of the linear segment
LAB_POW = 1.0 / 3.0                # Cube root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# CIELUV Constants (Source: CIELUV 1976 / CIE 15:2004)
LUV_U_V_MULT = 13.0                # Multiplier for 'u' and 'v' chromaticity coordinates
LUV_KAPPA = 24389.0 / 27.0         # Slope of the linear L* segment
LUV_U_NUM = 4.0                    # Numerator coefficient for u' chromaticity calculation
LUV_V_NUM = 9.0                    # Numerator coefficient for v' chromaticity calculation
LUV_DENOM_Y = 15.0                 # Y-coefficient for the denominator in chromaticity formulas
LUV_DENOM_Z = 3.0                  # Z-coefficient for the denominator in chromaticity formulas
LUV_Z_CONST = 12.0                 # Constant used in the Z coordinate derivation from LUV
LUV_L_THR = 8.0                    # Lightness threshold for switching between L* inverse segments
LUV_Z_U_MULT = 3.0                 # Z-axis multiplier for LUV to XYZ conversion
LUV_Z_V_MULT = 20.0                # Z-axis offset multiplier for LUV to XYZ conversion

# YUV Coefficients (Source: ITU-R BT.601)
YUV_Y = (0.299, 0.587, 0.114)              # RGB weights for luma
YUV_U = (-0.14713, -0.28886, 0.436)        # RGB weights for U chroma
YUV_V = (0.615, -0.51499, -0.10001)        # RGB weights for V chroma
YUV_R_V = 1.13983                          # V contribution to Red
YUV_G_U = -0.39465                         # U contribution to Green
YUV_G_V = -0.58060                         # V contribution to Green
YUV_B_U = 2.03211                          # U contribution to Blue

# Polar Representation
ACHROMATIC_EPS = 0.0001            # |a| and |b| at or below this give hue 0

# ==========================================
# Gamut Search Constants
# ==========================================

MAX_CHROMA_SEARCH_CEIL = 200.0     # Upper bound of the max-chroma bisection
MAX_CHROMA_TOLERANCE = 1.0         # Interval width at which the max-chroma bisection stops
CLIP_CHROMA_TOLERANCE = 0.01       # Interval width at which the gamut clip bisection stops
CHANNEL_ROUNDING_MARGIN = 0.5      # Distance outside 0-255 that still rounds onto a valid channel
CONTRAST_STRETCH_ITERATIONS = 10   # Fixed bisection steps for contrast_stretch

# ==========================================
# Colorspaces
# ==========================================

COLORSPACES = ("lab", "luv", "hsl", "yuv", "hslab", "hsluv")
RELATIVE_COLORSPACES = {
    "hslab": "lab",
    "hsluv": "luv",
}
DEFAULT_COLORSPACE = "lab"
DEFAULT_MIX_WEIGHT = 0.5

# Angle units, expressed as degrees per unit
ANGLE_UNITS = {
    "deg": 1.0,
    "rad": 180.0 / 3.141592653589793,
    "grad": 0.9,
    "turn": 360.0,
}

# ==========================================
# Diagnostics Styling
# ==========================================

MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
