import logging

import pytest
from mock import Mock

def test_main_output(capsys):
    from bimap import demo
    assert demo.main([]) == 0
    out, _ = capsys.readouterr()
    assert out.split('\n') == ['1', '', 'one', '', '5', 'five', '', '', '']

def test_main_verbose(monkeypatch):
    import bimap.demo as demo
    basic = Mock()
    monkeypatch.setattr(demo.logging, 'basicConfig', basic)
    monkeypatch.setattr(demo, 'show', Mock())
    demo.main(['--verbose'])
    basic.assert_called_with(level=logging.DEBUG)
    assert demo.show.call_count == 8

def test_main_quiet(monkeypatch):
    import bimap.demo as demo
    basic = Mock()
    monkeypatch.setattr(demo.logging, 'basicConfig', basic)
    show = Mock()
    monkeypatch.setattr(demo, 'show', show)
    demo.main([])
    assert basic.called == False
    show.assert_called_with(None)
