from functools import wraps
import math


class EloError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Ugly hack decorator that converts unforeseen exceptions to EloErrors.

    Passes through EloErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except EloError:
                raise
            except Exception as e:
                raise EloError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def _isoddinteger(n):
    return n.is_integer() and n % 2 == 1


def ieee_divide(left, right):
    '''
    Float division, giving infinity or NaN on division by zero.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def ieee_power(left, right):
    '''
    C99 pow(): infinity on overflow or zero to a negative power, NaN for a
    negative base to a fractional power.
    '''
    try:
        return math.pow(left, right)
    except OverflowError:
        if left < 0 and _isoddinteger(right):
            return -math.inf
        return math.inf
    except ValueError:
        if left == 0:
            if _isoddinteger(right):
                return math.copysign(math.inf, left)
            return math.inf
        return math.nan


def ieee_unary(f):
    '''
    Wrap a one-argument math function to return NaN on domain errors.
    '''
    @wraps(f)
    def wrapped(only):
        try:
            return f(only)
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return wrapped
