from pjlink_client.protocol import encode_frame, decode_frame

def test_encode_appends_carriage_return():
    assert encode_frame("%1POWR ?") == b"%1POWR ?\r"

def test_encode_does_not_validate_content():
    assert encode_frame("") == b"\r"
    assert encode_frame("anything at all") == b"anything at all\r"

def test_decode_strips_terminator():
    assert decode_frame(b"%1POWR=1\r") == "%1POWR=1"

def test_decode_returns_first_frame_only():
    assert decode_frame(b"%1POWR=1\r%1INPT=31\r") == "%1POWR=1"

def test_decode_unterminated_frame():
    assert decode_frame(b"%1POWR=0") == "%1POWR=0"

def test_decode_replaces_non_ascii_bytes():
    text = decode_frame(b"%1NAME=caf\xe9\r")
    assert text.startswith("%1NAME=caf")
    assert len(text) == len("%1NAME=cafe")

def test_decode_drops_nul_left_from_previous_terminator():
    assert decode_frame(b"\x00%1POWR=1\r") == "%1POWR=1"
    assert decode_frame(b"\x00\x00PJLINK 0\r\x00") == "PJLINK 0"
