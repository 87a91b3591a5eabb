"""Character, byte-buffer, string, linked-list, line-reading and output helpers."""