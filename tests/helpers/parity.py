"""
Strict Parity Helper

Byte-exact comparison with a row-by-row hex diff on mismatch, so a failing
fixture shows which field drifted.
"""


def assert_hex_equal(actual: bytes, expected_hex: str, ctx: str) -> None:
    """
    Assert that actual bytes match expected hex string with detailed diff output.

    Args:
        actual: Actual bytes to compare
        expected_hex: Expected hex string (spaces allowed)
        ctx: Context string for error messages

    Raises:
        AssertionError: If bytes don't match, with detailed diff
    """
    expected_hex = expected_hex.replace(" ", "").lower()
    actual_hex = actual.hex()

    if actual_hex == expected_hex:
        return

    expected_bytes = bytes.fromhex(expected_hex)
    lines = [
        f"Binary parity mismatch in {ctx}",
        f"Expected length: {len(expected_bytes)} bytes, actual length: {len(actual)} bytes",
        f"{'Offset':<8} {'Expected':<47} {'Actual':<47}",
    ]
    for i in range(0, max(len(expected_bytes), len(actual)), 16):
        exp_chunk = expected_bytes[i:i + 16]
        act_chunk = actual[i:i + 16]
        marker = "" if exp_chunk == act_chunk else "  <-- DIFF"
        exp_hex = " ".join(f"{b:02x}" for b in exp_chunk).ljust(47)
        act_hex = " ".join(f"{b:02x}" for b in act_chunk).ljust(47)
        lines.append(f"{i:08x} {exp_hex} {act_hex}{marker}")
    raise AssertionError("\n".join(lines))
