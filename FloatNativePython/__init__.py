'''
A positive decimal fraction packed into a 32-bit word, similar to IEEE754:

    0(2)     00000001(2)   00000000000000000000001(2)  = 8388609(10) = 0.5
    |            |                   |
    sign(1bit)  exp(8bit)          frac(23bit)

The value of a word is frac * 2 ^ -exp, and the sign is always 0.
'''
from AutoGenerate.common.constants import SIGN_BITS
from AutoGenerate.common.constants import EXPONENT_BITS
from AutoGenerate.common.constants import FRACTION_BITS
from AutoGenerate.common.constants import MAX_FRACTION_DIGITS
from AutoGenerate.common.constants import MAX_INPUT_DIGITS
from AutoGenerate.common.functions import getInternalArray


WORD_BITS = SIGN_BITS+EXPONENT_BITS+FRACTION_BITS
SIGN_BIT = WORD_BITS-1
FRACTION_MASK = (1<<FRACTION_BITS)-1


POW_2_TO_INTERNAL = {n+1:internal for n,internal in enumerate(getInternalArray())}


def newFloat(s):
    if not isValid(s):
        raise ValueError('invalid decimal fraction: {!r}'.format(s))
    digits,number = countDigits(s)
    return toBinaryRepl(digits,number)


def isValid(s):
    return all(c.isdigit() or c == '.' for c in s) and s.count('.') <= 1


def countDigits(s):
    # '0.0234' -> (4,234)
    parts = s.split('.')
    if len(parts) != 2 or parts[1] == '':
        raise ValueError('no fractional part in {!r}'.format(s))
    if len(parts[1]) > MAX_INPUT_DIGITS:
        raise ValueError('fractional part longer than {} digits'.format(MAX_INPUT_DIGITS))
    return len(parts[1]),int(parts[1])


def toBinaryRepl(digits,number):
    edge = 10**digits
    res = 0
    dig = 0
    while True:
        number <<= 1
        if number >= edge:
            res = setNthBit(res,dig,True)
            number %= edge
        if number == 0 or dig == MAX_FRACTION_DIGITS:
            break
        dig += 1
    res = reverseFromNthBit(res,dig+1)
    res |= (dig+1)<<FRACTION_BITS
    return setNthBit(res,SIGN_BIT,False)


def getExponentPart(word):
    return setNthBit(word,SIGN_BIT,False)>>FRACTION_BITS


def getSignificandPart(word):
    return word&FRACTION_MASK


def printDecimal(word):
    '''
    Print the value of a word in decimal.
    The rounding happens when the word is created, so the printed value is exact.
    '''
    internal = POW_2_TO_INTERNAL.get(getExponentPart(word))
    if internal is None:
        return ''
    num = str(internal.cur*getSignificandPart(word))
    return '0.'+num.zfill(internal.inc)


def formatBits(word):
    bits = '{0:0{1}b}'.format(word,WORD_BITS)
    sign,exponent,fraction = bits[:SIGN_BITS],bits[SIGN_BITS:SIGN_BITS+EXPONENT_BITS],bits[SIGN_BITS+EXPONENT_BITS:]
    return '   {}    {}    {}\n  sign  exponent           fraction'.format(sign,exponent,fraction)


def setNthBit(num,n,b):
    if b:
        return num|(1<<n)
    return num&~(1<<n)


def getNthBit(num,n):
    return num&(1<<n) != 0


def reverseFromNthBit(target,bits):
    # reverseFromNthBit(0b100111001,6) == 0b100111
    res = 0
    for i in range(bits):
        res = setNthBit(res,bits-i-1,getNthBit(target,i))
    return res
