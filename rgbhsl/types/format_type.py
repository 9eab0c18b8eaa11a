import numpy as np

HUE_360 = 360.0
PERCENT_MAX = 100.0
UNIT_MAX = 1.0
BYTE_MAX = 255

# dtype used when exporting channels as bytes
byte_dtype = np.uint8
