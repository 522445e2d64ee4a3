"""Assorted small problems: creators, temperatures, sentences, teams and towers."""


def most_popular_creator(creators, ids, views):
    """Return [creator, id] pairs for the creators with the highest total views.

    Each creator's id is that of their most viewed video, the lexicographically
    smallest on ties.  Creators appear in order of their first video.
    """
    if not len(creators) == len(ids) == len(views):
        raise ValueError("creators, ids and views must have the same length")
    totals = {}
    best_video = {}
    for creator, video_id, count in zip(creators, ids, views):
        totals[creator] = totals.get(creator, 0) + count
        current = best_video.get(creator)
        if current is None or count > current[0] or (count == current[0] and video_id < current[1]):
            best_video[creator] = (count, video_id)
    if not totals:
        return []
    top = max(totals.values())
    return [
        [creator, best_video[creator][1]]
        for creator, total in totals.items()
        if total == top
    ]


def convert_temperature(celsius):
    """Return [kelvin, fahrenheit] for a temperature in degrees Celsius."""
    return [celsius + 273.15, celsius * 1.80 + 32.00]


def is_circular_sentence(sentence):
    """Return whether each word ends with the letter the next one starts with, cyclically."""
    if not sentence:
        raise ValueError("sentence must not be empty")
    words = sentence.split(" ")
    if sentence[0] != sentence[-1]:
        return False
    return all(prev[-1:] == word[:1] for prev, word in zip(words, words[1:]))


def divide_players(skill):
    """Return the total chemistry of pairing players into teams of equal skill, or -1."""
    ordered = sorted(skill)
    if not ordered or len(ordered) % 2:
        raise ValueError("an even, non-zero number of players is required")
    half = len(ordered) // 2
    target = ordered[0] + ordered[-1]
    chemistry = 0
    for low, high in zip(ordered[:half], reversed(ordered[half:])):
        if low + high != target:
            return -1
        chemistry += low * high
    return chemistry


def hanota(a, b, c):
    """Move every disk from a to c through b, following the Tower of Hanoi rules.

    The lists are changed in place; the end of each list is the top of its peg.
    """

    def move(count, source, spare, target):
        if count == 0:
            return
        move(count - 1, source, target, spare)
        target.append(source.pop())
        move(count - 1, spare, source, target)

    move(len(a), a, b, c)