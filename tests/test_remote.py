from __future__ import annotations

import io
import unittest


class RemoteTests(unittest.TestCase):
    def test_buttons_forward_to_television(self) -> None:
        from tvremote.core import remote
        from tvremote.core.television import InputMode, Television

        tv = Television()
        remote.toggle_input_mode(tv)
        remote.channel_down(tv)
        remote.toggle_power(tv)

        self.assertIs(tv.input_mode, InputMode.CABLE)
        self.assertEqual(tv.channel, 128)
        self.assertFalse(tv.power)

        remote.channel_up(tv)
        self.assertEqual(tv.channel, 1)

    def test_set_channel_uses_validated_setter(self) -> None:
        from tvremote.core import remote
        from tvremote.core.television import Television

        tv = Television()
        remote.set_channel(tv, 200)
        self.assertEqual(tv.channel, 1)

        remote.set_channel(tv, 77)
        self.assertEqual(tv.channel, 77)

    def test_display_settings(self) -> None:
        from tvremote.core import remote
        from tvremote.core.television import Television

        tv = Television(channel=3)
        out = io.StringIO()
        remote.display_settings(tv, out)
        self.assertEqual(out.getvalue(), "Mode: Antenna\nChannel: 3\n")

        remote.toggle_power(tv)
        out = io.StringIO()
        remote.display_settings(tv, out)
        self.assertEqual(out.getvalue(), "")

    def test_remote_holds_no_state(self) -> None:
        from tvremote.core import remote
        from tvremote.core.television import Television

        a = Television(channel=10)
        b = Television(channel=20)
        remote.channel_up(a)
        remote.channel_up(b)
        self.assertEqual((a.channel, b.channel), (11, 21))


if __name__ == "__main__":
    unittest.main()
