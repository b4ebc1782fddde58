from AutoGenerate.common.functions import getInternalArray
from AutoGenerate.common.functions import formatInternal


internalArray = getInternalArray()


for n in range(1,len(internalArray)+1):
    print(formatInternal(n,internalArray[n-1]))
