import io

import pytest

from debugger import Debugger, main
from trace_execution import main as trace_main
from trace_execution import trace


@pytest.fixture
def dbg():
    # 0:'+' x2  1:'['  2:'>'  3:'+'  4:'<'  5:'-'  6:']'  7:'>'  8:'.'
    return Debugger('++[>+<-]>.', io.StringIO(), io.StringIO())


class TestDebugger:
    def test_step_advances_one_op(self, dbg):
        assert dbg.pc == 0
        assert dbg.run_step()
        assert dbg.pc == 1
        assert dbg.tape[0] == 2
        assert dbg.step_count == 1

    def test_continue_stops_at_breakpoint(self, dbg):
        assert dbg.toggle_breakpoint(6) is True
        assert dbg.run_to_breakpoint() is True
        assert dbg.pc == 6
        assert dbg.tape[:2] == [1, 1]

    def test_toggle_removes_breakpoint(self, dbg):
        dbg.toggle_breakpoint(6)
        assert dbg.toggle_breakpoint(6) is False
        assert dbg.run_to_breakpoint() is False
        assert dbg.vm.finished
        assert dbg.vm.output_stream.getvalue() == '\x02'

    def test_dump_memory(self, dbg):
        dbg.toggle_breakpoint(6)
        dbg.run_to_breakpoint()
        assert dbg.ptr == 0
        assert dbg.dump_memory(0, 5) == [(0, 1), (1, 1)]
        assert dbg.dump_memory(1) == [(1, 1)]
        assert dbg.dump_memory() == [(0, 1), (1, 1)]

    def test_dump_memory_clamps_negative_address(self):
        dbg = Debugger('+>>+', io.StringIO(), io.StringIO())
        dbg.vm.run()
        assert dbg.tape == [1, 0, 1]
        assert dbg.dump_memory(-1, 2) == [(0, 1), (1, 0)]
        assert dbg.dump_memory(-3, 1) == [(0, 1)]

    def test_negative_dump_address_keeps_session_alive(self, monkeypatch, capsys):
        dbg = Debugger('+>+', io.StringIO(), io.StringIO())
        commands = iter(['m -3', 'm 0 1', 'q'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(commands))
        dbg.run()
        out = capsys.readouterr().out
        assert 'Usage: m [addr] [count] (addr >= 0)' in out
        assert '[0000]: 0' in out
        assert out.rstrip().endswith('Execution finished.')

    def test_state_shows_head_and_current_op(self, dbg, capsys):
        dbg.run_step()
        dbg.print_state()
        out = capsys.readouterr().out
        assert 'PC: 1 / 9  Ptr: 0  Tape: 1 cells' in out
        assert '[002]' in out
        assert '-> 0001: [ (target: 7)' in out

    def test_interactive_session(self, dbg, monkeypatch, capsys):
        commands = iter(['b 6', 'c', 'm 0 2', 'x', 'q'])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(commands))
        dbg.run()
        out = capsys.readouterr().out
        assert 'Breakpoint set at 6' in out
        assert 'Breakpoint hit at 6' in out
        assert '[0000]: 1' in out
        assert 'Unknown command: x' in out
        assert out.rstrip().endswith('Execution finished.')

    def test_empty_command_repeats_last(self, dbg, monkeypatch):
        commands = iter(['s', '', ''])
        monkeypatch.setattr('builtins.input', lambda prompt='': next(commands))
        with pytest.raises(StopIteration):
            dbg.run()
        assert dbg.pc == 3

    def test_end_of_commands_ends_session(self, dbg, monkeypatch, capsys):
        def no_more(prompt=''):
            raise EOFError
        monkeypatch.setattr('builtins.input', no_more)
        dbg.run()
        assert 'Execution finished.' in capsys.readouterr().out


def test_main_requires_file(capsys):
    assert main([]) == 1
    assert 'Usage' in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / 'nope.bf')]) == 1
    assert 'cannot read' in capsys.readouterr().err


def test_main_reports_underflow(tmp_path, monkeypatch, capsys):
    source = tmp_path / 'bad.bf'
    source.write_text('<')
    monkeypatch.setattr('builtins.input', lambda prompt='': 's')
    assert main([str(source)]) == 1
    assert 'Memory underflow' in capsys.readouterr().err


def test_trace_finishes(program, capsys):
    finished, vm = trace(program('hello2.bf'))
    assert finished
    assert vm.output_stream.getvalue() == 'Hello World!\n'
    out = capsys.readouterr().out
    assert 'Finished at step' in out


def test_trace_stops_at_step_limit(capsys):
    finished, vm = trace('+[]', steps=50)
    assert not finished
    assert vm.step_count == 50
    assert 'Step limit 50 reached' in capsys.readouterr().out


def test_trace_main_rejects_non_numeric_steps(tmp_path, capsys):
    source = tmp_path / 'loop.bf'
    source.write_text('+[]')
    assert trace_main([str(source), 'many']) == 1
    assert 'Usage' in capsys.readouterr().out


def test_trace_main_with_step_limit(tmp_path, capsys):
    source = tmp_path / 'loop.bf'
    source.write_text('+[]')
    assert trace_main([str(source), '10']) == 0
    assert 'Step limit 10 reached' in capsys.readouterr().out
