# (r, g, b) unit floats -> (h degrees, s percent, l percent)
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 100.0, 50.0),
    (0.0, 1.0, 0.0): (120.0, 100.0, 50.0),
    (0.0, 0.0, 1.0): (240.0, 100.0, 50.0),
    (1.0, 1.0, 0.0): (60.0, 100.0, 50.0),
    (0.0, 1.0, 1.0): (180.0, 100.0, 50.0),
    (1.0, 0.0, 1.0): (300.0, 100.0, 50.0),
    (1.0, 1.0, 1.0): (0.0, 0.0, 100.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (0.5, 0.5, 0.5): (0.0, 0.0, 50.0),
    (1.0, 0.5, 0.25): (20.0, 100.0, 62.5),
    (0.25, 0.5, 0.75): (210.0, 50.0, 50.0),
    (0.2, 0.4, 0.2): (120.0, 100.0 / 3.0, 30.0),
}

# (r, g, b) bytes -> (r, g, b) unit floats
samples_bytes_rgb = {
    (255, 255, 255): (1.0, 1.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (1.0, 0.0, 0.0),
    (51, 102, 204): (0.2, 0.4, 0.8),
}
