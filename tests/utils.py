def channel_error(c, d):
    """Mean signed difference over all four channels of two colors."""
    return sum(x - y for x, y in zip(c.value, d.value)) / 4.0


def max_channel_error(c, d):
    return max(abs(x - y) for x, y in zip(c.value, d.value))
