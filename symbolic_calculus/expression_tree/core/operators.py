import numpy as np
import numba
from enum import IntEnum

from ...errors import MathDomainError

class NodeType(IntEnum):
  NUMBER = 0
  VARIABLE = 1
  BINARY_OP = 2
  UNARY_OP = 3

class OpType(IntEnum):
  # Binary ops
  ADD = 0
  SUB = 1
  MUL = 2
  DIV = 3
  POW = 4
  # Unary ops (functions)
  LN = 5
  SQRT = 6
  COS = 7
  SIN = 8
  TG = 9
  CTG = 10
  ARCSIN = 11
  ARCCOS = 12
  ARCTG = 13
  ARCCTG = 14

# Mapping dictionaries
BINARY_OP_MAP = {'+': OpType.ADD, '-': OpType.SUB, '*': OpType.MUL, '/': OpType.DIV, '^': OpType.POW}
UNARY_OP_MAP = {
    'ln': OpType.LN, 'sqrt': OpType.SQRT,
    'cos': OpType.COS, 'sin': OpType.SIN,
    'tg': OpType.TG, 'ctg': OpType.CTG,
    'arcsin': OpType.ARCSIN, 'arccos': OpType.ARCCOS,
    'arctg': OpType.ARCTG, 'arcctg': OpType.ARCCTG
}

BINARY_OPS = frozenset(BINARY_OP_MAP.values())
UNARY_OPS = frozenset(UNARY_OP_MAP.values())

OP_SYMBOLS = {op: symbol for symbol, op in BINARY_OP_MAP.items()}
OP_SYMBOLS.update({op: name for name, op in UNARY_OP_MAP.items()})

# Print precedence: a larger value binds tighter
OP_PRECEDENCE = {
  OpType.ADD: 1, OpType.SUB: 1,
  OpType.MUL: 2, OpType.DIV: 2,
  OpType.POW: 3,
}
OP_PRECEDENCE.update({op: 3 for op in UNARY_OPS})

LEAF_PRECEDENCE = 4


def arity(op: OpType) -> int:
  return 2 if op in BINARY_OPS else 1


def is_function_name(name: str) -> bool:
  return name in UNARY_OP_MAP


# ---------------------------------------------------------------------------
# Scalar evaluation rules. Each takes (left, right) with NaN standing in for
# the missing left child of a unary operator, and raises MathDomainError
# outside the operator's domain.
# ---------------------------------------------------------------------------

def _domain_error(op: OpType, message: str) -> MathDomainError:
  return MathDomainError(f"{OP_SYMBOLS[op]}: {message}", OP_SYMBOLS[op])


def eval_add(left: float, right: float) -> float:
  return float(np.float64(left) + np.float64(right))


def eval_sub(left: float, right: float) -> float:
  return float(np.float64(left) - np.float64(right))


def eval_mul(left: float, right: float) -> float:
  with np.errstate(over='ignore'):
    return float(np.float64(left) * np.float64(right))


def eval_div(left: float, right: float) -> float:
  if right == 0.0:
    raise _domain_error(OpType.DIV, "division by zero")
  with np.errstate(over='ignore'):
    return float(np.float64(left) / np.float64(right))


def eval_pow(left: float, right: float) -> float:
  if left == 0.0 and right < 0.0:
    raise _domain_error(OpType.POW, "zero raised to a negative power")
  if left < 0.0 and not float(right).is_integer():
    raise _domain_error(OpType.POW, "negative base with a fractional exponent")
  with np.errstate(over='ignore'):
    return float(np.power(np.float64(left), np.float64(right)))


def eval_ln(left: float, right: float) -> float:
  if right <= 0.0:
    raise _domain_error(OpType.LN, "logarithm of a non-positive argument")
  return float(np.log(right))


def eval_sqrt(left: float, right: float) -> float:
  if right < 0.0:
    raise _domain_error(OpType.SQRT, "square root of a negative argument")
  return float(np.sqrt(right))


def eval_cos(left: float, right: float) -> float:
  return float(np.cos(right))


def eval_sin(left: float, right: float) -> float:
  return float(np.sin(right))


def eval_tg(left: float, right: float) -> float:
  if np.cos(right) == 0.0:
    raise _domain_error(OpType.TG, "tangent is undefined where cosine is zero")
  return float(np.tan(right))


def eval_ctg(left: float, right: float) -> float:
  sin_value = np.sin(right)
  if sin_value == 0.0:
    raise _domain_error(OpType.CTG, "cotangent is undefined where sine is zero")
  return float(np.cos(right) / sin_value)


def eval_arcsin(left: float, right: float) -> float:
  if not -1.0 <= right <= 1.0:
    raise _domain_error(OpType.ARCSIN, "argument outside [-1, 1]")
  return float(np.arcsin(right))


def eval_arccos(left: float, right: float) -> float:
  if not -1.0 <= right <= 1.0:
    raise _domain_error(OpType.ARCCOS, "argument outside [-1, 1]")
  return float(np.arccos(right))


def eval_arctg(left: float, right: float) -> float:
  return float(np.arctan(right))


def eval_arcctg(left: float, right: float) -> float:
  return float(np.pi / 2 - np.arctan(right))


# ---------------------------------------------------------------------------
# Batch kernels over sample arrays. Domain violations produce NaN instead of
# raising so a whole column can be evaluated in one call.
# ---------------------------------------------------------------------------

_ADD = int(OpType.ADD)
_SUB = int(OpType.SUB)
_MUL = int(OpType.MUL)
_DIV = int(OpType.DIV)
_POW = int(OpType.POW)
_LN = int(OpType.LN)
_SQRT = int(OpType.SQRT)
_COS = int(OpType.COS)
_SIN = int(OpType.SIN)
_TG = int(OpType.TG)
_CTG = int(OpType.CTG)
_ARCSIN = int(OpType.ARCSIN)
_ARCCOS = int(OpType.ARCCOS)
_ARCTG = int(OpType.ARCTG)
_ARCCTG = int(OpType.ARCCTG)

@numba.njit(cache=True, inline='always')
def evaluate_variable_batch(X, index):
  return X[:, index].astype(np.float64)

@numba.njit(cache=True, inline='always')
def evaluate_number_batch(n_samples, value):
  return np.full(n_samples, value, dtype=np.float64)

@numba.njit(cache=True, error_model='numpy')
def evaluate_binary_op_batch(left_val, right_val, op_code):
  n = left_val.shape[0]
  out = np.empty(n, dtype=np.float64)
  for i in range(n):
    a = left_val[i]
    b = right_val[i]
    if op_code == _ADD:
      out[i] = a + b
    elif op_code == _SUB:
      out[i] = a - b
    elif op_code == _MUL:
      out[i] = a * b
    elif op_code == _DIV:
      if b == 0.0:
        out[i] = np.nan
      else:
        out[i] = a / b
    elif op_code == _POW:
      if a == 0.0 and b < 0.0:
        out[i] = np.nan
      elif a < 0.0 and np.floor(b) != b:
        out[i] = np.nan
      else:
        out[i] = a ** b
    else:
      out[i] = np.nan
  return out

@numba.njit(cache=True, error_model='numpy')
def evaluate_unary_op_batch(operand_val, op_code):
  n = operand_val.shape[0]
  out = np.empty(n, dtype=np.float64)
  for i in range(n):
    x = operand_val[i]
    if op_code == _LN:
      out[i] = np.log(x) if x > 0.0 else np.nan
    elif op_code == _SQRT:
      out[i] = np.sqrt(x) if x >= 0.0 else np.nan
    elif op_code == _COS:
      out[i] = np.cos(x)
    elif op_code == _SIN:
      out[i] = np.sin(x)
    elif op_code == _TG:
      out[i] = np.tan(x) if np.cos(x) != 0.0 else np.nan
    elif op_code == _CTG:
      s = np.sin(x)
      out[i] = np.cos(x) / s if s != 0.0 else np.nan
    elif op_code == _ARCSIN:
      out[i] = np.arcsin(x) if -1.0 <= x <= 1.0 else np.nan
    elif op_code == _ARCCOS:
      out[i] = np.arccos(x) if -1.0 <= x <= 1.0 else np.nan
    elif op_code == _ARCTG:
      out[i] = np.arctan(x)
    elif op_code == _ARCCTG:
      out[i] = np.pi / 2 - np.arctan(x)
    else:
      out[i] = np.nan
  return out
