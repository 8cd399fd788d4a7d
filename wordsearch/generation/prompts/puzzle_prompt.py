from typing import List, Sequence

from ...verifiers.models import Direction


def format_words(words: Sequence[str]) -> str:
    """Format the word list as a comma-separated string."""
    return ", ".join(words)


def format_directions(directions: Sequence[Direction]) -> str:
    """Format permitted directions using their readable labels."""
    return ", ".join(direction.label for direction in directions)


def build_puzzle_prompt(
    words: Sequence[str],
    size: int,
    directions: Sequence[Direction],
) -> str:
    """
    Build the generation request for a word search puzzle.

    Args:
        words: Words to embed in the grid
        size: Side length of the square grid
        directions: Directions words are allowed to run in

    Returns:
        Formatted prompt string
    """
    lines: List[str] = []

    lines.append("Generate a high-quality word search puzzle.")
    lines.append(f"- Grid size must be exactly {size}x{size}.")
    lines.append(f"- The list of words to embed is: {format_words(words)}.")
    lines.append(f"- Permitted word directions are: {format_directions(directions)}.")
    lines.append("")

    lines.append("CRITICAL INSTRUCTIONS:")
    lines.append(
        "1. You MUST embed the words from the list into the grid. The spelling of each "
        "embedded word must be PERFECT. For example, if the word is \"BOAT\", the letters "
        "B, O, A, T must appear in the correct sequence in the grid."
    )
    lines.append(
        "2. Words MUST NOT intersect or share any letters. Each letter cell in the grid "
        "can only belong to a single word from the solution. This is a strict rule."
    )
    lines.append(
        "3. After placing the words, fill ALL remaining empty grid cells with random "
        "uppercase English letters (A-Z)."
    )
    lines.append(
        f"4. The final 'grid' in the JSON output must be a perfect {size}x{size} array "
        "of single-character strings."
    )
    lines.append(
        "5. The 'solution' array MUST accurately report the location of each word you "
        "successfully placed. DOUBLE-CHECK that the start and end coordinates correspond "
        "to the EXACT word in the grid."
    )
    lines.append(
        "6. The 'wordsUsed' array must ONLY contain words that you successfully placed "
        "in the grid with the correct spelling."
    )
    lines.append(
        "7. VERY IMPORTANT: No word should start at the top-left corner of the grid "
        "(row 0, column 0). The 'startRow' and 'startCol' for any word in the solution "
        "cannot both be 0."
    )
    lines.append("")
    lines.append("Produce a JSON object that strictly follows the provided schema.")

    return "\n".join(lines)
