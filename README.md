# marcort

Runtime support functions for simulations produced from equation-based
models. `marcort` provides the scalar and array built-ins that generated
model code calls, together with the option sets and memory helpers it
relies on.

## Installation

```
pip install marcort
```

Running the tests needs the `test` extra:

```
pip install "marcort[test]"
```

## What is inside

- `marcort.types`: the runtime element types `ScalarType` (`VOID`, `BOOL`,
  `INT32`, `UINT32`, `INT64`, `UINT64`, `FLOAT32`, `FLOAT64`), `ArrayType`
  and `PointerType`. `ScalarType.from_value` tells the type of a Python or
  NumPy scalar. `mangle(name, result, *args)` builds the symbol name a
  runtime function goes by, for example
  `mangle("abs", ScalarType.INT32, ScalarType.INT32)` gives `"_Mabs_i32_i32"`.
- `marcort.options`: dataclasses with the defaults for the simulation
  (`SimulationOptions`, with an optional `SchedulerPolicy`), CSV printing
  (`PrintOptions`), the forward Euler and Runge-Kutta solvers
  (`EulerForwardOptions`, `RungeKuttaOptions`) and multithreading
  (`MultithreadingOptions`). Shared instances are returned by
  `simulation_options()`, `print_options()`, `euler_forward_options()`,
  `runge_kutta_options()` and `multithreading_options()`.
- `marcort.elementary`: `acos`, `asin`, `atan`, `atan2`, `cos`, `cosh`, `exp`,
  `ln`, `log10`, `sin`, `sinh`, `sqrt`, `tan`, `tanh`. They compute in single
  precision for `numpy.float32` arguments and in double precision otherwise.
  `ln`, `log10` and `sqrt` raise `ValueError` for negative arguments.
- `marcort.arithmetic`: `abs_value`, `ceil`, `floor`, `integer`, `div`, `mod`,
  `rem`, `sign`, `max_scalars`, `min_scalars`, with the Boolean, integer and
  floating-point rules of the runtime. Integer and Boolean division by zero
  raises `ZeroDivisionError`.
- `marcort.power`: `power(base, exponent, result)`, where `result` is the
  `ScalarType` the value is wanted in. A zero base needs a positive
  exponent (`ValueError` otherwise), and integer results that do not fit
  raise `OverflowError`.
- `marcort.array_functions`: `diagonal`, `identity`, `linspace`, `ones`,
  `zeros`, `max_array`, `min_array`, `product`, `sum_array`, `symmetric`,
  `transpose`. The functions that fill arrays write in place into a NumPy
  array supplied by the caller.
- `marcort.utility`: `clone`, which copies elements in row-major order
  between arrays of equal size, converting the element type, and
  `memref_copy`, which copies between arrays of equal shape and type.
- `marcort.printing`: `format_scalar`, `format_array`, `format_value` and
  `print_value`. Booleans are written as `true`/`false`, integers in
  decimal and reals in scientific notation; arrays as nested bracketed
  lists.
- `marcort.memory`: `allocate`, `reallocate` and `release` work on
  `bytearray` buffers; when `simulation_options().profiling` is set, the
  calls are counted by the shared `memory_profiler()`, whose `report()`
  returns a summary. `MemoryPool` holds float64 NumPy buffers by id,
  `MemoryPoolManager.instance()` is the process-wide registry of pools and
  `memory_pool_get(pool, buffer)` fetches a buffer from it.

## Example

```python
import numpy as np

from marcort.arithmetic import mod
from marcort.array_functions import identity, sum_array
from marcort.power import power
from marcort.printing import format_value
from marcort.types import ScalarType

matrix = np.empty((3, 3), dtype=np.float64)
identity(matrix)
print(format_value(matrix))
print(sum_array(matrix))               # 3.0
print(mod(-7, 3))                      # 2
print(power(2, 10, ScalarType.INT64))  # 1024
```

Invalid calls raise exceptions, for example a division by zero or arrays
whose shapes do not match.

## What it does not do

`marcort` is a library of support functions only. It does not run
simulations: there is no command-line program, no equation scheduler, no
time-stepping or nonlinear solvers and no CSV output writer. The option
classes hold the settings such components would read, but nothing in the
package acts on them apart from the memory profiling switch.