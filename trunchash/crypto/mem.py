"""In-place zeroing of sensitive buffers."""

import ctypes


def secure_zero(buf) -> None:
    """
    Overwrite a writable buffer with zeros.
    
    The store goes through libc memset on the buffer's own address, so the
    bytes are cleared in place rather than replaced by a new object.
    
    Args:
        buf: bytearray, writable memoryview or other contiguous writable buffer
        
    Raises:
        TypeError if the buffer is read-only (e.g. bytes) or not contiguous
    """
    with memoryview(buf) as view:
        if view.readonly:
            raise TypeError("Cannot zero a read-only buffer")
        if not view.contiguous:
            raise TypeError("Cannot zero a non-contiguous buffer")
        
        size = view.nbytes
        if size == 0:
            return
        
        with view.cast('B') as flat:
            c_buf = (ctypes.c_char * size).from_buffer(flat)
            ctypes.memset(ctypes.addressof(c_buf), 0, size)
            # drop the export before the view is released
            del c_buf
