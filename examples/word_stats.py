from __future__ import annotations

import logging

from streamkit import Stream, StreamConfig, Trace, collectors

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

TEXT = """
the quick brown fox jumps over the lazy dog
the dog barks and the fox runs
"""


def word_lengths(text: str, trace: Trace) -> dict[int, list[str]]:
    return (
        Stream.of(*text.splitlines(), config=StreamConfig(name="words"), trace=trace)
        .filter(lambda line: line.strip() != "")
        .flat_map(str.split)
        .distinct()
        .sorted()
        .collect(collectors.grouping_by(len))
    )


def longest_word(text: str) -> str:
    return (
        Stream.from_iterable(text.split())
        .max(lambda a, b: len(a) - len(b))
        .or_else("<none>")
    )


if __name__ == "__main__":
    trace = Trace()
    for length, words in word_lengths(TEXT, trace).items():
        print(f"{length}: {', '.join(words)}")
    print("longest:", longest_word(TEXT))
    print("empty text:", longest_word(""))

    for event in trace.get_events():
        print(event.id, event.parent_id, event.action, event.info, event.duration_ms)
