"""Pure-Python helpers for character classes, bit sets, wait statuses, protocol headers and flag values."""