from unittest.mock import Mock

import pytest

from examplekit.apiclient import MyApiClient, Server, main


def _mock_server():
    client = Mock(spec=MyApiClient)
    return Server(client), client


def test_function_to_test_with_mock_client():
    server, mock_client = _mock_server()
    expected_input = 2
    expected_output = 4
    mock_client.api_double.return_value = expected_output

    result = server.function_to_test(expected_input)

    assert result == expected_output
    mock_client.api_double.assert_called_once_with(expected_input)


def test_function_to_test_propagates_errors():
    server, mock_client = _mock_server()
    mock_client.api_double.side_effect = RuntimeError("network down")
    with pytest.raises(RuntimeError, match="network down"):
        server.function_to_test(2)


@pytest.mark.parametrize("value", [0, 2, -5, 21])
def test_real_client_doubles(value):
    assert Server(MyApiClient()).function_to_test(value) == value * 2


def test_main_prints_result(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "4\n"