"""
Print every richness measure for a short sample sentence.
Replace SAMPLE_TEXT with your own text to experiment.
"""

from __future__ import annotations

from lexical_richness import LexicalRichness

SAMPLE_TEXT = "The quick brown fox jumps over the lazy dog."


def main() -> None:
    lex = LexicalRichness(SAMPLE_TEXT)

    print(f"Words: {lex.words}  Terms: {lex.terms}")
    print(f"TTR: {lex.ttr:.4f}")
    print(f"RTTR: {lex.rttr:.4f}")
    print(f"CTTR: {lex.cttr:.4f}")
    print(f"Herdan's C: {lex.herdan:.4f}")
    print(f"Maas's index: {lex.maas:.4f}")
    print(f"MSTTR (segments of 5): {lex.msttr(segment_window=5):.4f}")
    print(f"MATTR (windows of 3): {lex.mattr(window_size=3):.4f}")


if __name__ == "__main__":
    main()
