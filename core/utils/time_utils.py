from time import time

def get_current_timestamp() -> int:
    '''Get the current timestamp in milliseconds.'''
    return int(time() * 1000)  # milliseconds
