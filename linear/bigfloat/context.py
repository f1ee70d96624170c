# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Working precision and shared constants.

Values are handled internally as raw mpmath value tuples
``(sign, man, exp, bc)``. They are immutable, so a `Context` and its
constants can be shared freely between threads.
"""

import math
import threading
from typing import Optional, Tuple

import mpmath
from mpmath.libmp import (
    finf,
    fnan,
    fninf,
    fnone,
    fone,
    from_float,
    from_int,
    from_str,
    ftwo,
    fzero,
    mpf_add,
    mpf_div,
    mpf_mul,
    mpf_pos,
    mpf_shift,
    mpf_sub,
    round_nearest,
    to_str,
)

from .errors import DomainError

MPF = Tuple[int, int, int, int]

DEFAULT_PRECISION: int = 256
DOUBLE_PRECISION: int = 53

_PI_DIGITS = (
    "3.1415926535897932384626433832795028841971693993751058209749445923078164"
    "062862089986280348253421170679821480865132823066470938446095505822317253"
    "594081284811174502841027019385211055596446229489549303819644288109756659"
    "334461284756482337867831652712019091456485669234603486104543266482133936"
    "072602491412737245870066063155881748815209209628292540917153643678925903"
    "600113305305488204665213841469519415116094330572703657595919530921861173"
    "819326117931051185480744623799627495673518857527248912279381830119491298"
    "336733624406566430860213949463952247371907021798609437027705392171762931"
    "767523846748184676694051320005681271452635608277857713427577896091736371"
    "787214684409012249534301465495853710507922796892589235420199561121290219"
    "608640344181598136297747713099605187072113499999983729780499510597317328"
    "160963185950244594553469083026425223082533446850352619311881710100031378"
    "387528865875332083814206171776691473035982534904287554687311595628638823"
    "537875937519577818577805321712268066130019278766111959092164201989380952"
    "572010654858632788659361533818279682303019520353018529689957736225994138"
    "912497217752834791315155748572424541506959508295331168617278558890750983"
    "817546374649393192550604009277016711390098488240128583616035637076601047"
    "101819429555961989467678374494482553797747268471040475346462080466842590"
    "694912933136770289891521047521620569660240580381501935112533824300355876"
    "402474964732639141992726042699227967823547816360093417216412199245863150"
    "302861829745557067498385054945885869269956909272107975093029553211653449"
    "872027559602364806654991198818347977535663698074265425278625518184175746"
    "728909777727938000816470600161452491921732172147723501414419735685481613"
    "611573525521334757418494684385233239073941433345477624168625189835694855"
    "620992192221842725502542568876717904946016534668049886272327917860857843"
    "838279679766814541009538837863609506800642251252051173929848960841284886"
    "269456042419652850222106611863067442786220391949450471237137869609563643"
    "719172874677646575739624138908658326459958133904780275900994657640789512"
    "694683983525957098258226205224894077267194782684826014769909026401363944"
    "374553050682034962524517493996514314298091906592509372216964615157098583"
    "874105978859597729754989301617539284681382686838689427741559918559252459"
    "539594310499725246808459872736446958486538367362226260991246080512438843"
    "904512441365497627807977156914359977001296160894416948685558484063534220"
    "722258284886481584560285060168427394522674676788952521385225499546667278"
    "239864565961163548862305774564980355936345681743241125150760694794510965"
    "960940252288797108931456691368672287489405601015033086179286809208747609"
    "178249385890097149096759852613655497818931297848216829989487226588048575"
    "640142704775551323796414515237462343645428584447952658678210511413547357"
    "395231134271661021359695362314429524849371871101457654035902799344037420"
    "073105785390621983874478084784896833214457138687519435064302184531910484"
    "810053706146806749192781911979399520614196634287544406437451237181921799"
    "983910159195618146751426912397489409071864942319615679452080"
)

# Leave some slack below what the literal can actually resolve.
MAX_PRECISION: int = int((len(_PI_DIGITS) - 2) * math.log2(10)) - 32


class Context:
    """
    Fixed working precision plus the constants parsed at that precision.

    Parameters
    ----------
    precision : int
        Mantissa width in bits. 256 for general use, 53 to match IEEE
        double arithmetic.
    """

    __slots__ = ("_precision", "_zero", "_one", "_two", "_minus_one", "_pi")

    def __init__(self, precision: int = DEFAULT_PRECISION):
        if isinstance(precision, bool) or not isinstance(precision, int):
            raise TypeError(f"precision must be an int, got {type(precision)}")
        if not 2 <= precision <= MAX_PRECISION:
            raise ValueError(
                f"precision must lie in [2, {MAX_PRECISION}], got {precision}"
            )
        set_ = object.__setattr__
        set_(self, "_precision", precision)
        set_(self, "_zero", fzero)
        set_(self, "_one", fone)
        set_(self, "_two", ftwo)
        set_(self, "_minus_one", fnone)
        set_(self, "_pi", from_str(_PI_DIGITS, precision, round_nearest))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(precision={self._precision})"

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def zero(self) -> MPF:
        return self._zero

    @property
    def one(self) -> MPF:
        return self._one

    @property
    def two(self) -> MPF:
        return self._two

    @property
    def minus_one(self) -> MPF:
        return self._minus_one

    @property
    def pi(self) -> MPF:
        return self._pi

    @property
    def half_pi(self) -> MPF:
        # exact: only the exponent changes
        return mpf_shift(self._pi, -1)

    # -----------------------------------------------------------------
    # Arithmetic, rounded to nearest at the working precision
    # -----------------------------------------------------------------
    def add(self, s: MPF, t: MPF) -> MPF:
        return mpf_add(s, t, self._precision, round_nearest)

    def sub(self, s: MPF, t: MPF) -> MPF:
        return mpf_sub(s, t, self._precision, round_nearest)

    def mul(self, s: MPF, t: MPF) -> MPF:
        return mpf_mul(s, t, self._precision, round_nearest)

    def div(self, s: MPF, t: MPF) -> MPF:
        return mpf_div(s, t, self._precision, round_nearest)

    def integer(self, n: int) -> MPF:
        return from_int(n, self._precision, round_nearest)

    # -----------------------------------------------------------------
    # Conversion between caller values and raw values
    # -----------------------------------------------------------------
    def convert(self, x) -> MPF:
        """Round `x` (mpf, int, float or decimal string) to working precision."""
        if hasattr(x, "_mpf_"):
            s = mpf_pos(x._mpf_, self._precision, round_nearest)
        elif isinstance(x, bool):
            raise TypeError("bool is not a numeric argument")
        elif isinstance(x, int):
            s = from_int(x, self._precision, round_nearest)
        elif isinstance(x, float):
            s = from_float(x, self._precision, round_nearest)
        elif isinstance(x, str):
            s = from_str(x, self._precision, round_nearest)
        else:
            raise TypeError(f"cannot convert {type(x)} to a precision value")
        if s in (fnan, finf, fninf):
            raise DomainError(f"argument must be finite, got {x!r}")
        return s

    def make(self, s: MPF) -> mpmath.mpf:
        return mpmath.mp.make_mpf(s)

    def to_string(self, x, digits: Optional[int] = None) -> str:
        """Format `x` to `digits` significant decimal digits."""
        if digits is None:
            digits = max(1, int(self._precision / math.log2(10)))
        s = x._mpf_ if hasattr(x, "_mpf_") else x
        return to_str(s, digits)


# ---------------------------------------------------------------------
# Process-wide default context
# ---------------------------------------------------------------------
_default_lock = threading.Lock()
_default_precision: int = DEFAULT_PRECISION
_default_context: Optional[Context] = None


def configure(precision: int) -> None:
    """
    Fix the process-wide working precision.

    Must run before the default context is first used; afterwards only the
    precision already in force is accepted.
    """
    global _default_precision
    with _default_lock:
        if _default_context is not None:
            if _default_context.precision != precision:
                raise RuntimeError(
                    "working precision is already fixed at "
                    f"{_default_context.precision} bits"
                )
            return
        Context(precision)  # validate
        _default_precision = precision


def get_context() -> Context:
    """Return the process-wide context, creating it on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = Context(_default_precision)
        return _default_context
