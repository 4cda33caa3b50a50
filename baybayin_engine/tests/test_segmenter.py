import pytest
from baybayin_engine.default_mappings import COMMON_WORDS
from baybayin_engine.glyph_table import GlyphTable
from baybayin_engine.lexicon import Lexicon
from baybayin_engine.segmenter import ForwardSegmenter, ReverseSegmenter, build_syllable_rules

@pytest.fixture(scope="module")
def glyph_table():
    return GlyphTable()

@pytest.fixture(scope="module")
def forward(glyph_table):
    return ForwardSegmenter(glyph_table, Lexicon())

@pytest.fixture(scope="module")
def reverse(glyph_table):
    return ReverseSegmenter(glyph_table, Lexicon())

def rules_only(forward, text):
    return forward.segment(text, use_word_mapping=False)

# --- rule cascade ---

def test_rule_order():
    names = [rule.name for rule in build_syllable_rules()]
    assert names == [
        "digraph_vowel",
        "digraph_killed",
        "consonant_vowel",
        "consonant_killed",
        "standalone_vowel",
    ]

def test_rule_match_reports_key_and_span():
    digraph_vowel = build_syllable_rules()[0]
    assert digraph_vowel.match("anga", 1) == ("nga", 3)
    assert digraph_vowel.match("anga", 0) is None

def test_inherent_vowel(forward):
    assert rules_only(forward, "tala") == "ᜆᜎ"

def test_kudlit_forms(forward):
    assert rules_only(forward, "kubo") == "ᜃᜓᜊᜓ"
    assert rules_only(forward, "tiki") == "ᜆᜒᜃᜒ"

def test_digraph_killed(forward):
    assert rules_only(forward, "ng") == "ᜅ᜔"

def test_digraph_with_vowel(forward):
    assert rules_only(forward, "nga") == "ᜅ"
    assert rules_only(forward, "ngipin") == "ᜅᜒᜉᜒᜈ᜔"

def test_digraph_beats_single_consonants(forward):
    # n + ga would give a different spelling
    assert rules_only(forward, "nga") != "ᜈ᜔ᜄ"
    assert rules_only(forward, "anghel") == "ᜀᜅ᜔ᜑᜒᜎ᜔"

def test_killed_consonants(forward):
    assert rules_only(forward, "bundok") == "ᜊᜓᜈ᜔ᜇᜓᜃ᜔"
    assert rules_only(forward, "takbo") == "ᜆᜃ᜔ᜊᜓ"

def test_standalone_vowels(forward):
    assert rules_only(forward, "aso") == "ᜀᜐᜓ"
    assert rules_only(forward, "kain") == "ᜃᜁᜈ᜔"
    assert rules_only(forward, "i") == "ᜁ"

def test_e_and_o_use_i_and_u_signs(forward):
    assert rules_only(forward, "berde") == "ᜊᜒᜍ᜔ᜇᜒ"
    assert rules_only(forward, "oo") == "ᜂᜂ"

def test_lexicon_spellings_agree_with_rules(forward):
    for word, glyphs in COMMON_WORDS.items():
        assert rules_only(forward, word) == glyphs, word

def test_uppercase_is_lowered(forward):
    assert rules_only(forward, "TALA") == "ᜆᜎ"
    assert rules_only(forward, "C") == "c"

def test_unsupported_letters_pass_through(forward):
    assert rules_only(forward, "c") == "c"
    assert rules_only(forward, "caf\u00e9") == "c\u1700f\u00e9"
    assert rules_only(forward, "xyz") == "xᜌ᜔z"

def test_digits_and_symbols_keep_order(forward):
    result = rules_only(forward, "abc123!@#")
    assert result == "ᜀᜊ᜔c123!@#"
    assert "".join(ch for ch in result if ch in "123!@#") == "123!@#"

def test_empty_input(forward):
    assert forward.segment("") == ""
    assert forward.segment("", use_word_mapping=False) == ""

# --- lexicon handling ---

def test_lexicon_hit(forward):
    assert forward.segment("ako") == "ᜀᜃᜓ"
    assert forward.segment("Kumusta") == "ᜃᜓᜋᜓᜐ᜔ᜆ"

def test_lexicon_keeps_trailing_punctuation(forward):
    assert forward.segment("ako!") == "ᜀᜃᜓ!"
    assert forward.segment("salamat.") == "ᜐᜎᜋᜆ᜔."
    assert forward.segment("ako?!") == "ᜀᜃᜓ?!"

def test_word_mapping_can_be_disabled(glyph_table):
    segmenter = ForwardSegmenter(glyph_table, Lexicon({"ako": "ᜀ"}))
    assert segmenter.segment("ako") == "ᜀ"
    assert segmenter.segment("ako", use_word_mapping=False) == "ᜀᜃᜓ"

def test_lexicon_requires_whole_token(glyph_table):
    segmenter = ForwardSegmenter(glyph_table, Lexicon({"ako": "ᜀ"}))
    assert segmenter.segment("akoako") == "ᜀᜃᜓᜀᜃᜓ"
    assert segmenter.segment("ako-ako") == "ᜀᜃᜓ-ᜀᜃᜓ"

# --- whitespace and idempotence ---

def test_whitespace_runs_preserved(forward):
    assert forward.segment("ako  tala\tbundok\n") == "ᜀᜃᜓ  ᜆᜎ\tᜊᜓᜈ᜔ᜇᜓᜃ᜔\n"
    assert forward.segment("   ") == "   "
    assert forward.segment(" ako ") == " ᜀᜃᜓ "

@pytest.mark.parametrize("text", [
    "Kumusta ka, Maria?",
    "café 123",
    "ng mga bata",
    "ᜀᜃᜓ ako",
    "jeepney at kotse",
    "",
])
def test_forward_is_idempotent(forward, text):
    once = forward.segment(text)
    assert forward.segment(once) == once

def test_baybayin_inside_token_passes_through(forward):
    assert rules_only(forward, "ᜀka") == "ᜀᜃ"

# --- diacritic folding ---

def test_fold_diacritics(forward):
    assert forward.segment("niño", use_word_mapping=False) == "ᜈᜒñᜂ"
    assert forward.segment("niño", use_word_mapping=False, fold_diacritics=True) == "ᜈᜒᜈᜓ"
    assert forward.segment("ᜀᜃᜓ é", fold_diacritics=True) == "ᜀᜃᜓ ᜁ"

def test_decomposed_accents_are_composed(forward):
    assert rules_only(forward, "cafe\u0301") == "c\u1700f\u00e9"

# --- reverse ---

def test_reverse_single_glyph(reverse):
    assert reverse.segment("ᜃᜓ") == "ku"
    assert reverse.segment("ᜅ᜔") == "ng"
    assert reverse.segment("ᜆᜎ") == "tala"

def test_reverse_prefers_lexicon(reverse):
    # piecewise these would read "ati" and "uu"
    assert reverse.segment("ᜀᜆᜒ") == "ate"
    assert reverse.segment("ᜂᜂ") == "oo"

def test_reverse_passes_through_unknown(reverse):
    assert reverse.segment("ᜀᜃᜓ 123 abc") == "ako 123 abc"
    assert reverse.segment("\u171f") == "\u171f"
    assert reverse.segment("\u1712") == "\u1712"
    assert reverse.segment("") == ""

def test_reverse_keeps_decomposed_text(reverse):
    assert reverse.segment("cafe\u0301") == "cafe\u0301"
    assert reverse.segment("\u1703\u1713 e\u0301") == "ku e\u0301"

def test_reverse_is_lossy_for_e_and_o(forward, reverse):
    assert reverse.segment(forward.segment("bote", use_word_mapping=False)) == "buti"

def test_reverse_candidates_longest_first(reverse):
    lengths = [len(glyphs) for glyphs, _ in reverse.candidates()]
    assert lengths == sorted(lengths, reverse=True)

def test_reverse_lexicon_wins_equal_span(glyph_table):
    # same glyphs as the "ki" glyph entry
    reverse = ReverseSegmenter(glyph_table, Lexicon({"ke": "ᜃᜒ"}))
    assert reverse.segment("ᜃᜒ") == "ke"

def test_round_trip_lexicon_words(forward, reverse):
    for word in COMMON_WORDS:
        assert reverse.segment(forward.segment(word)) == word
        assert reverse.segment(forward.segment(word.upper())) == word
