import pytest

from minitalk.protocol import BitAssembler, decode_bits, encode_bits


def test_encode_single_ascii_letter_msb_first_with_terminator():
    # 'A' is 0x41 in ASCII.
    assert list(encode_bits("A")) == [0, 1, 0, 0, 0, 0, 0, 1] + [0] * 8


def test_empty_message_is_only_the_terminator():
    assert list(encode_bits("")) == [0] * 8


def test_bit_count_matches_byte_length_plus_terminator():
    message = "hello, world"
    assert len(list(encode_bits(message))) == 8 * (len(message) + 1)


def test_bytes_and_str_encode_the_same():
    assert list(encode_bits(b"abc")) == list(encode_bits("abc"))


@pytest.mark.parametrize("message", ["", "hi", "Hello there!", "caf\u00e9 \u2603", "a" * 200])
def test_round_trip(message):
    assert decode_bits(encode_bits(message)) == [message]


def test_several_messages_in_one_stream():
    bits = list(encode_bits("one")) + list(encode_bits("two"))
    assert decode_bits(bits) == ["one", "two"]


def test_trailing_partial_message_is_dropped():
    bits = list(encode_bits("done")) + list(encode_bits("pending"))[:-8]
    assert decode_bits(bits) == ["done"]


def test_assembler_returns_message_only_on_last_bit():
    assembler = BitAssembler()
    bits = list(encode_bits("ok"))
    results = [assembler.feed(bit) for bit in bits]
    assert results[-1] == "ok"
    assert all(result is None for result in results[:-1])


def test_assembler_reset_discards_partial_state():
    assembler = BitAssembler()
    for bit in list(encode_bits("junk"))[:13]:
        assembler.feed(bit)
    assembler.reset()
    results = [assembler.feed(bit) for bit in encode_bits("fresh")]
    assert results[-1] == "fresh"


def test_assembler_rejects_non_bits():
    assembler = BitAssembler()
    with pytest.raises(ValueError):
        assembler.feed(2)