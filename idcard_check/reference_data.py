"""Fixed reference tables for GB 11643-1999 identity numbers."""

LEGACY_LENGTH = 15
MODERN_LENGTH = 18
BODY_LENGTH = 17

# Top-level administrative prefixes (province, municipality, SAR, abroad).
REGION_CODES = frozenset({
    '11', '12', '13', '14', '15',
    '21', '22', '23',
    '31', '32', '33', '34', '35', '36', '37',
    '41', '42', '43', '44', '45', '46',
    '50', '51', '52', '53', '54',
    '61', '62', '63', '64', '65',
    '71', '81', '82', '91',
})

# Weight of each body digit, positions 1..17.
WEIGHTS = (7, 9, 10, 5, 8, 4, 2, 1, 6, 3, 7, 9, 10, 5, 8, 4, 2)

# Check character indexed by weighted sum mod 11.
CHECK_CODES = ('1', '0', 'X', '9', '8', '7', '6', '5', '4', '3', '2')

CHECK_CHARACTERS = frozenset(CHECK_CODES)
