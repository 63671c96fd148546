from .compression import HuffmanResult


def format_report(result: HuffmanResult) -> str:
    """Renders a HuffmanResult as the plain-text report printed by the CLI."""
    stats = result.stats
    width = stats.max_code_length
    lines = [f"Total number of characters: {stats.total_symbols}", ""]

    lines.append("Huffman Codes and Frequencies are (in order of frequency):")
    lines.append("")
    for symbol, code in result.order:
        lines.append(f"{symbol}  {code:>{width}}  ({result.freq[symbol]})")

    lines.append("")
    lines.append("Bits, Number, and Frequency of characters with the same bit count:")
    for bits, frequency in stats.length_frequencies.items():
        lines.append(f"Bits: {bits}  Numbers: {stats.length_counts[bits]}  Frequency: {frequency}")

    lines += [
        "",
        "The original string is :",
        result.text,
        "",
        "The encoded string is :",
        result.encoded.to01(),
        "",
        "The decoded string is :",
        result.decoded,
        "",
        f"Bits before encoding: {stats.bits_before}",
        f"Bits after encoding: {stats.bits_after}",
        f"Compression ratio: {stats.ratio:.6g}%",
    ]
    return "\n".join(lines)
