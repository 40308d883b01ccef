import pytest

from spacefighter.attachments import Attachable, Attachment
from spacefighter.vector2 import Vector2


class _Turret(Attachment):
    @property
    def attachment_type(self) -> str:
        return "Turret"

    def update(self, elapsed):
        pass


class _NoUpdate(Attachment):
    @property
    def attachment_type(self):
        return "Broken"


class _Hull(Attachable):
    def __init__(self):
        self.items = {}

    def get_attachment(self, key):
        return self.items.get(key)


def test_attachable_is_abstract():
    with pytest.raises(TypeError):
        Attachable()


def test_attachment_is_abstract():
    with pytest.raises(TypeError):
        Attachment("gun")
    with pytest.raises(TypeError):
        _NoUpdate("gun")


def test_key_is_kept():
    turret = _Turret("Main Turret")
    turret.attach_to(_Hull(), Vector2(0, -20))
    assert turret.key == "Main Turret"


def test_key_is_read_only():
    turret = _Turret("gun")
    turret.attach_to(_Hull(), Vector2(1, 1))
    with pytest.raises(AttributeError):
        turret.key = "other"
    assert turret.key == "gun"


def test_unattached_by_default():
    turret = _Turret("gun")
    assert turret.attached_to is None
    assert turret.offset == Vector2(0, 0)


def test_attach_to_records_owner_and_offset():
    hull = _Hull()
    turret = _Turret("gun")
    offset = Vector2(0, -20)
    Attachment.attach_to(turret, hull, offset)
    assert turret.attached_to is hull
    assert turret.offset == offset


def test_attaching_again_replaces_owner():
    first, second = _Hull(), _Hull()
    turret = _Turret("gun")
    turret.attach_to(first, Vector2(1, 1))
    turret.attach_to(second, Vector2(1, 0))
    assert turret.attached_to is second
    assert turret.offset == Vector2(1, 0)