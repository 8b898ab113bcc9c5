from fluent_pipe import compose


def increment(x: int) -> int:
    return x + 1


def tostring(x: int) -> str:
    return f'"{x}"'


def increment_then_tostring(x: int) -> str:
    return tostring(increment(x))


# Same as `increment_then_tostring`, built from the two stages instead of written out by hand
increment_then_tostring_2 = compose(tostring, increment)


if __name__ == "__main__":
    print("Call `increment(2)`", increment(2))
    print("Call `tostring(2)`", tostring(2))
    print("Call a single-purpose function", increment_then_tostring(6))
    print("Compose pattern: `increment_then_tostring_2(8)`", increment_then_tostring_2(8))
