from mpmath import mp
from mpmath import mpf
from mpmath import floor
from decimal import Decimal
from decimal import getcontext
from fractions import Fraction
from collections import namedtuple
from AutoGenerate.common.constants import MAX_EXPONENT
from AutoGenerate.common.constants import PRECISION


getcontext().prec = mp.dps = PRECISION


Internal = namedtuple('Internal','cur,inc')


def getInternal(n):
    # 2 ^ -n = 5 ^ n / 10 ^ n
    assert n >= 0
    return Internal(5**n,n)


def getInternalArray(maxExponent=MAX_EXPONENT):
    return [getInternal(n) for n in range(1,maxExponent+1)]


def refineInternal(n):
    cur = Fraction(1,2**n)
    inc = 0
    while cur.denominator != 1:
        cur *= 10
        inc += 1
    return Internal(int(cur),inc)


def refineInternalFloat(n):
    cur = 1.0/(2**n)
    inc = 0
    while cur - int(cur) != 0:
        cur *= 10
        inc += 1
    return Internal(int(cur),inc)


def refineInternalMpmath(n):
    cur = mpf(1)/2**n
    inc = 0
    while cur != floor(cur):
        cur *= 10
        inc += 1
    return Internal(int(cur),inc)


def getDecimalExpansion(n):
    return '{:f}'.format(Decimal(1)/Decimal(2**n))


def formatInternal(n,internal):
    return '{}u32 => Internal({}, {}),'.format(n,internal.cur,internal.inc)


def formatInternalComment(n,internal):
    return '// 2^(-{}) = {} = {} * 10^(-{})'.format(n,getDecimalExpansion(n),internal.cur,internal.inc)
