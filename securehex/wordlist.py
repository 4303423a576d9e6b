"""
Fixed word list for passphrase mode.
"""

WORD_LIST: tuple[str, ...] = (
    "Mountain",
    "Ocean",
    "Thunder",
    "Phoenix",
    "Dragon",
    "Crystal",
    "Shadow",
    "Lightning",
    "Frost",
    "Blaze",
    "Storm",
    "Eagle",
    "Tiger",
    "Wolf",
    "Bear",
    "River",
    "Forest",
    "Star",
    "Moon",
    "Sun",
    "Wind",
    "Fire",
    "Ice",
    "Earth",
    "Sky",
    "Cloud",
    "Rain",
    "Snow",
    "Leaf",
    "Tree",
    "Rock",
    "Gold",
    "Silver",
    "Diamond",
    "Ruby",
    "Sapphire",
    "Pearl",
    "Coral",
    "Wave",
    "Tide",
    "Shore",
)
