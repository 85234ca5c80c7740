"""Colour conversion, resizing, padding, cropping, rotation, flipping and blur filters."""