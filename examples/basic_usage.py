from __future__ import annotations

import secrets

from pyb32 import Error, decode, encode


def main() -> None:
    for plain in (b"", b"f", b"fooba", b"foobar", secrets.token_bytes(20)):
        text, err = encode(plain)
        assert err == Error.NO_ERROR
        back, err = decode(text)
        assert err == Error.NO_ERROR and back == plain
        print(f"{plain!r:>48} -> {text}")

    _, err = decode("not base32!")
    print("decode('not base32!') ->", err.name)


if __name__ == "__main__":
    main()
