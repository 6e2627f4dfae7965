import functools
import logging
import time

logger = logging.getLogger(__name__)


def timing_decorator(original_function):
    @functools.wraps(original_function)
    def wrapper_function(*args, **kwargs):
        start_time = time.perf_counter()
        result = original_function(*args, **kwargs)
        end_time = time.perf_counter()
        execution_time = end_time - start_time
        logger.debug(
            "Function '%s' executed in: %.4f seconds",
            original_function.__name__,
            execution_time,
        )
        return result

    # Return the wrapper function
    return wrapper_function
