# No dependencies
from enum import Enum
import numpy as np
class ComponentType(str, Enum):
    F32 = "float32"
    F64 = "float64"
    U8 = "uint8"
    U16 = "uint16"
    U32 = "uint32"
    U64 = "uint64"
    USIZE = "usize"

component_dtypes = {
    ComponentType.F32: np.dtype(np.float32),
    ComponentType.F64: np.dtype(np.float64),
    ComponentType.U8: np.dtype(np.uint8),
    ComponentType.U16: np.dtype(np.uint16),
    ComponentType.U32: np.dtype(np.uint32),
    ComponentType.U64: np.dtype(np.uint64),
    ComponentType.USIZE: np.dtype(np.uintp),
}

FLOAT_TYPES = {ComponentType.F32, ComponentType.F64}
