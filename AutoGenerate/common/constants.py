MAX_EXPONENT = 23 # Compute the table entry of 2 ^ -n for n = 1 to MAX_EXPONENT (2 ^ -24 no longer fits the fraction field)


SIGN_BITS     =  1 # The sign of every packed value (always 0)
EXPONENT_BITS =  8 # The exponent of the packed value, i.e. the number of fraction bits in use
FRACTION_BITS = 23 # The significand of the packed value


MAX_FRACTION_DIGITS = 20 # The binary expansion of a decimal fraction is cut after bit index MAX_FRACTION_DIGITS


PRECISION = 100 # The number of decimal digits used by 'decimal' and 'mpmath'


MAX_INPUT_DIGITS = 1000 # The longest fractional part accepted by the decimal-fraction codec
