import struct


def pack_f32(*vertices, endian="<"):
    return b"".join(struct.pack(f"{endian}3f", *v) for v in vertices)


def pack_indices(code, *faces, endian="<"):
    return b"".join(struct.pack(f"{endian}{len(f)}{code}", *f) for f in faces)
