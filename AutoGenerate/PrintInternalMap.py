from AutoGenerate.common.functions import getInternalArray
from AutoGenerate.common.functions import formatInternal
from AutoGenerate.common.functions import formatInternalComment


internalArray = getInternalArray()


print('struct Internal(u128, u32);')
print('static POW_2_TO_INTERNAL: phf::Map<u32, Internal> = phf_map! {')
for n in range(1,len(internalArray)+1):
    print('    {} {}'.format(formatInternal(n,internalArray[n-1]),formatInternalComment(n,internalArray[n-1])))
print('};')
