"""
Common Framerates
=================

Pre-validated framerates for the rates seen in day-to-day production.

Each rate is exposed as a module constant and as a lowercase function
returning the same immutable value.

Example:
    from vtc import rates

    rates.F23_98            # <23.98 NTSC>
    rates.f29_97_df()       # <29.97 NTSC DF>
"""

from fractions import Fraction

from vtc.framerate import Framerate, Ntsc


F23_98 = Framerate.new(Fraction(24000, 1001), ntsc=Ntsc.NON_DROP)
F24 = Framerate.new(24, ntsc=None)
F29_97_NDF = Framerate.new(Fraction(30000, 1001), ntsc=Ntsc.NON_DROP)
F29_97_DF = Framerate.new(Fraction(30000, 1001), ntsc=Ntsc.DROP)
F30 = Framerate.new(30, ntsc=None)
F47_95 = Framerate.new(Fraction(48000, 1001), ntsc=Ntsc.NON_DROP)
F48 = Framerate.new(48, ntsc=None)
F59_94_NDF = Framerate.new(Fraction(60000, 1001), ntsc=Ntsc.NON_DROP)
F59_94_DF = Framerate.new(Fraction(60000, 1001), ntsc=Ntsc.DROP)
F60 = Framerate.new(60, ntsc=None)


def f23_98() -> Framerate:
    """23.98 NTSC non-drop."""
    return F23_98


def f24() -> Framerate:
    return F24


def f29_97_ndf() -> Framerate:
    """29.97 NTSC non-drop."""
    return F29_97_NDF


def f29_97_df() -> Framerate:
    """29.97 NTSC drop-frame."""
    return F29_97_DF


def f30() -> Framerate:
    return F30


def f47_95() -> Framerate:
    """47.95 NTSC non-drop."""
    return F47_95


def f48() -> Framerate:
    return F48


def f59_94_ndf() -> Framerate:
    """59.94 NTSC non-drop."""
    return F59_94_NDF


def f59_94_df() -> Framerate:
    """59.94 NTSC drop-frame."""
    return F59_94_DF


def f60() -> Framerate:
    return F60


ALL = (
    F23_98,
    F24,
    F29_97_NDF,
    F29_97_DF,
    F30,
    F47_95,
    F48,
    F59_94_NDF,
    F59_94_DF,
    F60,
)
