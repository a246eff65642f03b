"""Disposer taking several resources.

The disposer receives every bound resource in order. Here it writes a final
message to a duplicated descriptor and closes it, the way a system call
taking two arguments would be wrapped. A single-descriptor binding can be
passed to ``os.write`` directly.
"""

from __future__ import annotations

import os

from scoped_resource import make_scoped_resource


def write_and_close(fd: int, final_message: str) -> None:
    os.write(fd, final_message.encode())
    os.close(fd)


def main() -> None:
    read_fd, write_fd = os.pipe()

    with make_scoped_resource(write_and_close, os.dup(write_fd), "final message\n") as out:
        os.write(out, b"begin\n")
        print(f"resource_count={len(out.resources)}")  # => resource_count=2

    os.close(write_fd)
    with os.fdopen(read_fd, encoding="utf-8") as reader:
        lines = reader.read().splitlines()

    print(f"written={lines}")  # => written=['begin', 'final message']


if __name__ == "__main__":
    main()
