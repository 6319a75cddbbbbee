from unittest.mock import MagicMock, patch

from minihttpie._cli._utils._console import ConsoleLogger, LogLevel


def test_singleton():
    logger1 = ConsoleLogger.get_instance()
    logger2 = ConsoleLogger()
    assert logger1 is logger2, "ConsoleLogger should be a singleton"


@patch("click.echo")
def test_log_levels(mock_echo):
    logger = ConsoleLogger.get_instance()
    for level in LogLevel:
        logger.log(f"{level.name.lower()} message", level)

    assert mock_echo.call_count == len(LogLevel)


@patch("click.echo")
def test_info_goes_to_stdout_and_the_rest_to_stderr(mock_echo):
    logger = ConsoleLogger.get_instance()
    logger.log("info")
    logger.warning("warning")

    assert mock_echo.call_args_list[0].kwargs["err"] is False
    assert mock_echo.call_args_list[1].kwargs["err"] is True


@patch("click.echo")
def test_log_with_custom_fg_bg(mock_echo):
    logger = ConsoleLogger.get_instance()
    logger.log("custom message", LogLevel.INFO, fg="red", bg="yellow")
    mock_echo.assert_called_once()
    assert "custom message" in mock_echo.call_args.args[0]


@patch("minihttpie._cli._utils._console.click.get_current_context")
@patch("minihttpie._cli._utils._console.click.echo")
def test_error_exit(mock_echo, mock_context):
    mock_ctx = mock_context.return_value
    mock_ctx.exit = MagicMock()

    logger = ConsoleLogger.get_instance()
    logger.error("error message", exit_code=2)

    mock_echo.assert_called_once()
    mock_ctx.exit.assert_called_once_with(2)


@patch("minihttpie._cli._utils._console.click.get_current_context")
@patch("minihttpie._cli._utils._console.click.echo")
def test_error_exit_defaults_to_build_error(mock_echo, mock_context):
    mock_ctx = mock_context.return_value
    mock_ctx.exit = MagicMock()

    ConsoleLogger.get_instance().error("error message")

    mock_ctx.exit.assert_called_once_with(1)
