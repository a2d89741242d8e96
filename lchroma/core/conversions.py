#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: lchroma/core/conversions.py

from typing import Tuple

from . import config as c

Triple = Tuple[float, float, float]


# ==========================================
# sRGB Transfer
# ==========================================


def _srgb_eotf(v: float) -> float:
    """Decode a unit-scale sRGB value to linear light."""
    if v <= c.SRGB_TO_LINEAR_TH:
        return v / c.SRGB_SLOPE
    return ((v + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _srgb_oetf(v: float) -> float:
    """Encode a unit-scale linear value with the sRGB curve."""
    if v <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * v
    return c.SRGB_DIVISOR * (v ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def srgb_to_linear(channel: float) -> float:
    """Linearize an sRGB channel given on a 0-100 scale."""
    return c.XYZ_SCALING * _srgb_eotf(channel / c.XYZ_SCALING)


def linear_to_srgb(channel: float) -> float:
    """Gamma-encode a linear channel given on a 0-100 scale."""
    return c.XYZ_SCALING * _srgb_oetf(channel / c.XYZ_SCALING)


def _percent_channels(color) -> Triple:
    return (
        color.red / c.RGB_MAX * c.XYZ_SCALING,
        color.green / c.RGB_MAX * c.XYZ_SCALING,
        color.blue / c.RGB_MAX * c.XYZ_SCALING,
    )


def _to_rgb255(r: float, g: float, b: float) -> Triple:
    scale = c.RGB_MAX / c.XYZ_SCALING
    return r * scale, g * scale, b * scale


# ==========================================
# RGB <-> XYZ
# ==========================================


def to_xyz(color) -> Triple:
    """Convert a color to CIE XYZ scaled 0-100."""
    r, g, b = (srgb_to_linear(ch) for ch in _percent_channels(color))
    x = r * c.M_SRGB_XYZ_X[0] + g * c.M_SRGB_XYZ_X[1] + b * c.M_SRGB_XYZ_X[2]
    y = r * c.M_SRGB_XYZ_Y[0] + g * c.M_SRGB_XYZ_Y[1] + b * c.M_SRGB_XYZ_Y[2]
    z = r * c.M_SRGB_XYZ_Z[0] + g * c.M_SRGB_XYZ_Z[1] + b * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def from_xyz(xyz: Triple) -> Triple:
    """Convert CIE XYZ (0-100) to unclamped 0-255 RGB floats."""
    x, y, z = xyz
    r_lin = x * c.M_XYZ_SRGB_R[0] + y * c.M_XYZ_SRGB_R[1] + z * c.M_XYZ_SRGB_R[2]
    g_lin = x * c.M_XYZ_SRGB_G[0] + y * c.M_XYZ_SRGB_G[1] + z * c.M_XYZ_SRGB_G[2]
    b_lin = x * c.M_XYZ_SRGB_B[0] + y * c.M_XYZ_SRGB_B[1] + z * c.M_XYZ_SRGB_B[2]
    return _to_rgb255(linear_to_srgb(r_lin), linear_to_srgb(g_lin), linear_to_srgb(b_lin))


# ==========================================
# RGB <-> YUV
# ==========================================


def to_yuv(color) -> Triple:
    """Convert a color to BT.601 YUV, stored as (Y, V, -U) on a 0-100 scale."""
    r, g, b = _percent_channels(color)
    y = c.YUV_Y[0] * r + c.YUV_Y[1] * g + c.YUV_Y[2] * b
    u = c.YUV_U[0] * r + c.YUV_U[1] * g + c.YUV_U[2] * b
    v = c.YUV_V[0] * r + c.YUV_V[1] * g + c.YUV_V[2] * b
    return y, v, -u


def from_yuv(yuv: Triple) -> Triple:
    """Convert a (Y, V, -U) triple back to unclamped 0-255 RGB floats."""
    y, v, neg_u = yuv
    u = -neg_u
    r = y + c.YUV_R_V * v
    g = y + c.YUV_G_U * u + c.YUV_G_V * v
    b = y + c.YUV_B_U * u
    return _to_rgb255(r, g, b)


# ==========================================
# XYZ <-> Lab
# ==========================================


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t**c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t**3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(xyz: Triple) -> Triple:
    """Convert XYZ to CIE LAB."""
    x, y, z = xyz
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(lab: Triple) -> Triple:
    """Convert LAB to CIE XYZ."""
    L, a, b = lab
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    return _xyz_f_inv(x_r) * c.D65_X, _xyz_f_inv(y_r) * c.D65_Y, _xyz_f_inv(z_r) * c.D65_Z


# ==========================================
# XYZ <-> Luv
# ==========================================


def _xyz_to_yuuvv(xyz: Triple) -> Triple:
    """Convert XYZ to (Y, u', v') chromaticity."""
    x, y, z = xyz
    denom = x + c.LUV_DENOM_Y * y + c.LUV_DENOM_Z * z
    if denom == 0:
        return y, 0.0, 0.0
    return y, (c.LUV_U_NUM * x) / denom, (c.LUV_V_NUM * y) / denom


def _yuuvv_to_xyz(yuuvv: Triple) -> Triple:
    y, u_prime, v_prime = yuuvv
    if v_prime == 0:
        return 0.0, y, 0.0
    x = y * (c.LUV_V_NUM * u_prime) / (c.LUV_U_NUM * v_prime)
    z = y * (c.LUV_Z_CONST - c.LUV_Z_U_MULT * u_prime - c.LUV_Z_V_MULT * v_prime) / (c.LUV_U_NUM * v_prime)
    return x, y, z


def xyz_to_luv(xyz: Triple) -> Triple:
    """Convert XYZ to CIE LUV."""
    y, u_prime, v_prime = _xyz_to_yuuvv(xyz)
    y_n, u_prime_n, v_prime_n = _xyz_to_yuuvv(c.WHITE_POINT)

    y_r = y / y_n
    if y_r > c.LAB_E:
        L = (c.LAB_L_MULT * (y_r**c.LAB_POW)) - c.LAB_L_SUB
    else:
        L = c.LUV_KAPPA * y_r

    u = c.LUV_U_V_MULT * L * (u_prime - u_prime_n)
    v = c.LUV_U_V_MULT * L * (v_prime - v_prime_n)
    return L, u, v


def luv_to_xyz(luv: Triple) -> Triple:
    """Convert CIE LUV to XYZ."""
    L, u, v = luv
    if L == 0:
        return 0.0, 0.0, 0.0

    y_n, u_prime_n, v_prime_n = _xyz_to_yuuvv(c.WHITE_POINT)
    u_prime = u / (c.LUV_U_V_MULT * L) + u_prime_n
    v_prime = v / (c.LUV_U_V_MULT * L) + v_prime_n

    if L > c.LUV_L_THR:
        y = y_n * (((L + c.LAB_L_SUB) / c.LAB_L_MULT) ** 3)
    else:
        y = y_n * L / c.LUV_KAPPA

    return _yuuvv_to_xyz((y, u_prime, v_prime))


# ==========================================
# RGB <-> HSL
# ==========================================


def rgb_to_hsl(color) -> Triple:
    """Convert a color to HSL as (hue degrees, saturation 0-100, lightness 0-100)."""
    r_f, g_f, b_f = color.red / c.RGB_MAX, color.green / c.RGB_MAX, color.blue / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.DIV_2)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HSL_BLUE_SECTOR)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return h, s * c.PERCENT_TO_FACTOR, L * c.PERCENT_TO_FACTOR


def hsl_to_rgb(h: float, s: float, L: float) -> Triple:
    """Convert HSL (degrees, 0-100, 0-100) to unclamped 0-255 RGB floats."""
    h = h % c.HUE_MAX
    s = s / c.PERCENT_TO_FACTOR
    L = L / c.PERCENT_TO_FACTOR
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    if 0 <= h < 60:
        r_p, g_p, b_p = chroma, x, 0
    elif 60 <= h < 120:
        r_p, g_p, b_p = x, chroma, 0
    elif 120 <= h < 180:
        r_p, g_p, b_p = 0, chroma, x
    elif 180 <= h < 240:
        r_p, g_p, b_p = 0, x, chroma
    elif 240 <= h < 300:
        r_p, g_p, b_p = x, 0, chroma
    else:
        r_p, g_p, b_p = chroma, 0, x
    return (r_p + m) * c.RGB_MAX, (g_p + m) * c.RGB_MAX, (b_p + m) * c.RGB_MAX
