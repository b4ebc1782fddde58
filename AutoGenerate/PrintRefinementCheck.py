import sys
from loguru import logger
from AutoGenerate.common.constants import MAX_EXPONENT
from AutoGenerate.common.functions import getInternal
from AutoGenerate.common.functions import refineInternal
from AutoGenerate.common.functions import refineInternalFloat
from AutoGenerate.common.functions import refineInternalMpmath


logger.remove()
logger.add(sys.stderr, format='{time:HH:mm:ss} | {level: <8} | {message}')


methods = [
    ('fraction', refineInternal      ),
    ('mpmath'  , refineInternalMpmath),
    ('float'   , refineInternalFloat ),
]


def show(internal):
    return 'Internal({}, {})'.format(internal.cur,internal.inc)


numOfMismatches = 0
for n in range(1,MAX_EXPONENT+1):
    exact = getInternal(n)
    assert exact == refineInternal(n)
    items = ['n = {:2d}'.format(n),'exact = {}'.format(show(exact))]
    for name,method in methods:
        actual = method(n)
        items.append('{} = {}'.format(name,show(actual)))
        if actual != exact:
            numOfMismatches += 1
            logger.warning('{} refinement of 2^(-{}) gives {} instead of {}'.format(name,n,show(actual),show(exact)))
    print(' | '.join(items))


logger.info('Checked {} exponents against {} refinements: {} mismatches'.format(MAX_EXPONENT,len(methods),numOfMismatches))
