# Default mappings used to build the glyph table, the lexicon and the advisor.
# The glyph table is generated from these inventories; nothing else lists glyphs.

# Standalone vowels (one sign each for a, i/e, u/o)
VOWELS = {
    "a": "ᜀ",
    "i": "ᜁ",
    "u": "ᜂ",
}

# Consonant bases, each carrying the inherent "a" vowel.
# Order matters only for readability: digraph "ng" sits where it does in the abakada.
CONSONANTS = {
    "k": "ᜃ",
    "g": "ᜄ",
    "ng": "ᜅ",
    "t": "ᜆ",
    "d": "ᜇ",
    "n": "ᜈ",
    "p": "ᜉ",
    "b": "ᜊ",
    "m": "ᜋ",
    "y": "ᜌ",
    "r": "ᜍ",
    "l": "ᜎ",
    "w": "ᜏ",
    "s": "ᜐ",
    "h": "ᜑ",
}

# Kudlit marks replacing the inherent vowel
KUDLIT = {
    "i": "ᜒ",  # above
    "u": "ᜓ",  # below
}

VIRAMA = "᜔"
INHERENT_VOWEL = "a"

# Latin vowel letters and the sign each one is written with.
# Filipino orthography writes e with the i sign and o with the u sign.
VOWEL_LETTERS = {
    "a": "a",
    "i": "i",
    "u": "u",
    "e": "i",
    "o": "u",
}

BAYBAYIN_BLOCK_START = 0x1700
BAYBAYIN_BLOCK_END = 0x171F

# Punctuation stripped off a token before the lexicon lookup
TRAILING_PUNCTUATION = ".,!?;:"

# Punctuation that may appear in well-formed Baybayin text
ALLOWED_PUNCTUATION = ".,!?;:-()'\""

# Common Tagalog words with their Baybayin spellings
COMMON_WORDS = {
    # Greetings
    "kumusta": "ᜃᜓᜋᜓᜐ᜔ᜆ",
    "maligayang": "ᜋᜎᜒᜄᜌᜅ᜔",
    "umaga": "ᜂᜋᜄ",
    "hapon": "ᜑᜉᜓᜈ᜔",
    "gabi": "ᜄᜊᜒ",

    # Common words
    "ako": "ᜀᜃᜓ",
    "ikaw": "ᜁᜃᜏ᜔",
    "siya": "ᜐᜒᜌ",
    "tayo": "ᜆᜌᜓ",
    "kami": "ᜃᜋᜒ",
    "kayo": "ᜃᜌᜓ",
    "sila": "ᜐᜒᜎ",

    "salamat": "ᜐᜎᜋᜆ᜔",
    "pakisuyo": "ᜉᜃᜒᜐᜓᜌᜓ",
    "oo": "ᜂᜂ",
    "hindi": "ᜑᜒᜈ᜔ᜇᜒ",

    # Family
    "pamilya": "ᜉᜋᜒᜎ᜔ᜌ",
    "ama": "ᜀᜋ",
    "ina": "ᜁᜈ",
    "anak": "ᜀᜈᜃ᜔",
    "kuya": "ᜃᜓᜌ",
    "ate": "ᜀᜆᜒ",

    # Basic verbs
    "kain": "ᜃᜁᜈ᜔",
    "inom": "ᜁᜈᜓᜋ᜔",
    "tulog": "ᜆᜓᜎᜓᜄ᜔",
    "gising": "ᜄᜒᜐᜒᜅ᜔",
    "lakad": "ᜎᜃᜇ᜔",
    "takbo": "ᜆᜃ᜔ᜊᜓ",

    # Colors
    "puti": "ᜉᜓᜆᜒ",
    "itim": "ᜁᜆᜒᜋ᜔",
    "pula": "ᜉᜓᜎ",
    "dilaw": "ᜇᜒᜎᜏ᜔",
    "berde": "ᜊᜒᜍ᜔ᜇᜒ",
    "asul": "ᜀᜐᜓᜎ᜔",

    # Numbers
    "isa": "ᜁᜐ",
    "dalawa": "ᜇᜎᜏ",
    "tatlo": "ᜆᜆ᜔ᜎᜓ",
    "apat": "ᜀᜉᜆ᜔",
    "lima": "ᜎᜒᜋ",
    "anim": "ᜀᜈᜒᜋ᜔",
    "pito": "ᜉᜒᜆᜓ",
    "walo": "ᜏᜎᜓ",
    "siyam": "ᜐᜒᜌᜋ᜔",
    "sampu": "ᜐᜋ᜔ᜉᜓ",
}

# Letters with no traditional sign, in the order their advisories are reported
LOSSY_LETTER_ADVISORIES = (
    ("c", "k/s", 'Letter "c" should be written as "k" or "s" in traditional Baybayin'),
    ("f", "p", 'Letter "f" is traditionally written as "p" in Baybayin'),
    ("j", "dy", 'Letter "j" should be written as "dy" in traditional Baybayin'),
    ("q", "k", 'Letter "q" should be written as "k" in traditional Baybayin'),
    ("v", "b", 'Letter "v" is traditionally written as "b" in Baybayin'),
    ("x", "ks", 'Letter "x" should be written as "ks" in traditional Baybayin'),
    ("z", "s", 'Letter "z" is traditionally written as "s" in Baybayin'),
)
