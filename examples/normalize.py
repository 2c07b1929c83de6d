import numpy as np

import qrsqrt


def normalize(v: np.ndarray) -> np.ndarray:
    v = v.astype(np.float32)
    return v * qrsqrt.approximate(np.dot(v, v))


v = np.array([3.0, 4.0, 12.0])
print(f"{normalize(v) = }")  # ~ [0.2308, 0.3077, 0.9231]
print(f"{qrsqrt.approximate(0.15625) = }")  # 1 / sqrt(0.15625) = 2.5298...
print(f"{qrsqrt.estimate(0.15625) = }")  # what the fuck?
