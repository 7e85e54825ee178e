import pytest

from element_network import ElementNetwork, ShellConfiguration
from element_network.shell import parse_pair, run_connect, run_disconnect, run_query


class TestParsePair:

    @pytest.mark.parametrize("line,expected", [
        ("1 2", (1, 2)),
        ("-1 7", (-1, 7)),
        ("+2 3", (2, 3)),
        ("5\t6", (5, 6)),
        ("007 8", (7, 8)),
    ])
    def test_valid(self, line, expected):
        assert parse_pair(line) == expected

    @pytest.mark.parametrize("line", [
        "", "1", "1 2 3", "a b", "1 x", "1.5 2",
        "1  2", " 1 2", "1 2 ", "1_0 2", "\u0661 2", "1 \uff12", "- 1",
    ])
    def test_invalid(self, line):
        assert parse_pair(line) is None


class TestCommandHandlers:

    def test_connect_success(self, network):
        outcome = run_connect(network, 1, 2)
        assert outcome.ok
        assert outcome.message == "Successfully connected: 1 and 2."
        assert outcome.error_kind is None

    def test_connect_errors_carry_kind(self, network):
        self_link = run_connect(network, 3, 3)
        assert not self_link.ok
        assert self_link.error_kind == "InvalidArgument"
        assert self_link.message == "Error: Cannot connect an element to itself."

        out_of_range = run_connect(network, 1, 7)
        assert out_of_range.error_kind == "OutOfRange"
        assert out_of_range.message == "Error: Element 7 is out of valid range (1 to 6)."

    def test_disconnect(self, network):
        missing = run_disconnect(network, 1, 2)
        assert missing.error_kind == "InvalidState"
        assert missing.message == "Error: Elements are not connected."

        network.connect(1, 2)
        done = run_disconnect(network, 2, 1)
        assert done.ok
        assert done.message == "Disconnected: 2 and 1."

    def test_query_messages(self, chain_network):
        assert run_query(chain_network, 1, 2).message == \
            "The elements 1 and 2 are directly connected (level 1)."
        assert run_query(chain_network, 1, 4).message == \
            "The elements 1 and 4 are indirectly connected (level 3)."
        assert run_query(chain_network, 1, 6).message == \
            "The elements 1 and 6 are not connected."
        assert run_query(chain_network, 0, 1).error_kind == "OutOfRange"

    def test_query_value(self, chain_network):
        outcome = run_query(chain_network, 4, 2)
        assert outcome.value.level == 2
        assert outcome.value.connected


class TestInteractiveSession:

    def test_default_size_on_empty_input(self, make_session):
        session, buffer = make_session([""])
        assert session.read_size() == 6
        assert "Defaulting to 6 elements." in buffer.getvalue()

    def test_reprompts_until_positive(self, make_session):
        session, _ = make_session(["abc", "0", "-4", "", "9"])
        assert session.read_size() == 9

    def test_size_parsing_is_strict(self, make_session):
        session, _ = make_session(["1_0", "\u0665", "4.0", "  7 "])
        assert session.read_size() == 7

    def test_loose_spacing_is_an_invalid_entry(self, make_session):
        session, buffer = make_session(["1  2", " 1 2", "1_0 2", "end", "end", "end"])
        report = session.run(size=10)
        assert report.connections_made == 0
        assert report.outcomes["connect"] == []
        assert buffer.getvalue().count("Invalid entry. Try: <int> <int>") == 3

    def test_configured_default_size(self, make_session):
        session, buffer = make_session(["  "], config=ShellConfiguration(default_size=3))
        assert session.read_size() == 3
        assert "Defaulting to 3 elements." in buffer.getvalue()

    def test_eof_while_reprompting_uses_default(self, make_session):
        session, _ = make_session(["x"])
        assert session.read_size() == 6

    def test_full_transcript(self, make_session):
        lines = [
            "",                      # size -> default 6
            "1 2", "2 3", "3 4", "1 1", "1 9", "oops", "1 2", "END",
            "3 4", "1 5", "end",
            "1 3", "1 4", "2 2", "5 6", "0 1", "End",
        ]
        session, buffer = make_session(lines)
        report = session.run()
        output = buffer.getvalue().splitlines()

        expected = [
            "Defaulting to 6 elements.",
            "",
            "Available integers: 1 - 6",
            "",
            "Type the integers you wish to connect (example: 1 2). Type 'end' to finish this step.",
            "Successfully connected: 1 and 2.",
            "Successfully connected: 2 and 3.",
            "Successfully connected: 3 and 4.",
            "Error: Cannot connect an element to itself.",
            "Error: Element 9 is out of valid range (1 to 6).",
            "Invalid entry. Try: <int> <int>",
            "Successfully connected: 1 and 2.",
            "",
            "Total connections made: 4",
            "",
            "Disconnect connections (example: 1 2). Type 'end' to finish.",
            "Disconnected: 3 and 4.",
            "Error: Elements are not connected.",
            "",
            "Consult connections (example: 1 4). Type 'end' to finish this step.",
            "The elements 1 and 3 are indirectly connected (level 2).",
            "The elements 1 and 4 are not connected.",
            "The elements 2 and 2 are indirectly connected (level 0).",
            "The elements 5 and 6 are not connected.",
            "Error: Element 0 is out of valid range (1 to 6).",
            "",
            "Program ended.",
        ]
        assert output == expected

        assert report.connections_made == 4
        assert report.network.edges()[0].a == 1
        assert report.network.edge_count == 2
        assert [o.ok for o in report.outcomes['disconnect']] == [True, False]
        assert len(report.outcomes['query']) == 5

    def test_end_of_input_closes_every_phase(self, make_session):
        session, buffer = make_session(["1 2"])
        report = session.run(size=3)
        assert report.connections_made == 1
        assert report.outcomes['disconnect'] == []
        assert report.outcomes['query'] == []
        assert buffer.getvalue().rstrip().endswith("Program ended.")

    def test_custom_terminator(self, make_session):
        config = ShellConfiguration(terminator="done")
        session, buffer = make_session(["1 2", "end", "DONE", "done", "done"], config=config)
        report = session.run(size=2)
        assert "Type 'done' to finish this step." in buffer.getvalue()
        assert report.connections_made == 1
        assert "Invalid entry. Try: <int> <int>" in buffer.getvalue()

    def test_summary_table(self, make_session):
        config = ShellConfiguration(show_summary=True)
        session, buffer = make_session(["1 2", "end", "end", "end"], config=config)
        session.run(size=4)
        output = buffer.getvalue()
        assert "Network Summary" in output
        assert "Components" in output
        assert "16.67%" in output
        assert "OK" in output

    def test_sessions_do_not_share_networks(self, make_session):
        first, _ = make_session(["1 2", "end", "end", "end"])
        second, _ = make_session(["end", "end", "end"])
        assert first.run(size=3).network.edge_count == 1
        assert second.run(size=3).network.edge_count == 0
