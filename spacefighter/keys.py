"""Keyboard key and mouse button identifiers."""

from enum import IntEnum


class Key(IntEnum):
    """Keys on a keyboard."""

    A = 1
    B = 2
    C = 3
    D = 4
    E = 5
    F = 6
    G = 7
    H = 8
    I = 9  # noqa: E741
    J = 10
    K = 11
    L = 12
    M = 13
    N = 14
    O = 15  # noqa: E741
    P = 16
    Q = 17
    R = 18
    S = 19
    T = 20
    U = 21
    V = 22
    W = 23
    X = 24
    Y = 25
    Z = 26

    NUM_0 = 27
    NUM_1 = 28
    NUM_2 = 29
    NUM_3 = 30
    NUM_4 = 31
    NUM_5 = 32
    NUM_6 = 33
    NUM_7 = 34
    NUM_8 = 35
    NUM_9 = 36

    PAD_0 = 37
    PAD_1 = 38
    PAD_2 = 39
    PAD_3 = 40
    PAD_4 = 41
    PAD_5 = 42
    PAD_6 = 43
    PAD_7 = 44
    PAD_8 = 45
    PAD_9 = 46

    F1 = 47
    F2 = 48
    F3 = 49
    F4 = 50
    F5 = 51
    F6 = 52
    F7 = 53
    F8 = 54
    F9 = 55
    F10 = 56
    F11 = 57
    F12 = 58

    ESCAPE = 59
    TILDE = 60
    MINUS = 61
    EQUALS = 62
    BACKSPACE = 63
    TAB = 64
    OPENBRACE = 65
    CLOSEBRACE = 66
    ENTER = 67
    SEMICOLON = 68
    QUOTE = 69
    BACKSLASH = 70
    BACKSLASH2 = 71
    COMMA = 72
    FULLSTOP = 73
    SLASH = 74
    SPACE = 75

    INSERT = 76
    DELETE = 77
    HOME = 78
    END = 79
    PGUP = 80
    PGDN = 81
    LEFT = 82
    RIGHT = 83
    UP = 84
    DOWN = 85

    PAD_SLASH = 86
    PAD_ASTERISK = 87
    PAD_MINUS = 88
    PAD_PLUS = 89
    PAD_DELETE = 90
    PAD_ENTER = 91

    PRINTSCREEN = 92
    PAUSE = 93

    LSHIFT = 215
    RSHIFT = 216
    LCTRL = 217
    RCTRL = 218
    ALT = 219
    ALTGR = 220
    LWIN = 221
    RWIN = 222
    MENU = 223
    SCROLLLOCK = 224
    NUMLOCK = 225
    CAPSLOCK = 226

    MAX = 227


class MouseButton(IntEnum):
    """Buttons on a mouse."""

    LEFT = 1
    RIGHT = 2
    CENTER = 3
    BACK = 4
    FORWARD = 5