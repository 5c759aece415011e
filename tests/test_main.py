"""Tests for main.py CLI interface."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pagekit.config.settings import Settings
from pagekit.error_handling.exceptions import DeviceIdentityError
from pagekit.main import async_main, create_parser, main, open_page


class TestCLIParser:
    """Test command line parser."""

    def test_parser_creation(self):
        """Test parser exposes both commands."""
        parser = create_parser()

        args = parser.parse_args(["mac-id", "--separator", ":", "--upper"])
        assert args.command == "mac-id"
        assert args.separator == ":"
        assert args.upper is True

        args = parser.parse_args([
            "open", "https://example.com", "--device-cookies",
            "--verify-certificate", "--screenshot", "out.png",
        ])
        assert args.command == "open"
        assert args.url == "https://example.com"
        assert args.device_cookies is True
        assert args.verify_certificate is True
        assert args.screenshot == Path("out.png")
        assert args.mac_id is None
        assert args.headed is False

    def test_version(self, capsys):
        """--version prints the package version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert "pagekit 0.1.0" in capsys.readouterr().out


@patch("pagekit.main.setup_logging")
class TestCommands:
    """Test command dispatch."""

    @pytest.mark.asyncio
    async def test_mac_id(self, mock_setup_logging, capsys):
        """mac-id prints the bare id."""
        with patch("pagekit.main.get_mac_id", return_value="00059a3c7800"):
            result = await async_main(["mac-id"])

        assert result == 0
        assert "00059a3c7800" in capsys.readouterr().out
        mock_setup_logging.assert_called_once_with(log_level=None)

    @pytest.mark.asyncio
    async def test_mac_id_formatted(self, mock_setup_logging, capsys):
        """mac-id can reformat the id."""
        with patch("pagekit.main.get_mac_id", return_value="00059a3c7800"):
            result = await async_main(["--debug", "mac-id", "--separator", "-", "--upper"])

        assert result == 0
        assert "00-05-9A-3C-78-00" in capsys.readouterr().out
        mock_setup_logging.assert_called_once_with(log_level="DEBUG")

    @pytest.mark.asyncio
    async def test_no_command_prints_help(self, mock_setup_logging, capsys):
        """Without a command the help is shown."""
        result = await async_main([])

        assert result == 1
        assert "usage: pagekit" in capsys.readouterr().out

    def test_errors_return_non_zero(self, mock_setup_logging, capsys):
        """pagekit errors are reported and give exit code 1."""
        with patch(
            "pagekit.main.get_mac_id",
            side_effect=DeviceIdentityError("No hardware address available for this device"),
        ):
            result = main(["mac-id"])

        assert result == 1
        assert "No hardware address available" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_open_dispatch(self, mock_setup_logging):
        """open passes its flags through."""
        with patch("pagekit.main.open_page", new_callable=AsyncMock, return_value=0) as mock_open:
            result = await async_main(["open", "https://example.com", "--headed", "--mac-id", "abc"])

        assert result == 0
        kwargs = mock_open.await_args.kwargs
        assert kwargs["url"] == "https://example.com"
        assert kwargs["mac_id"] == "abc"
        assert kwargs["headless"] is False

    @pytest.mark.asyncio
    async def test_open_screenshot_defaults_to_screenshots_dir(self, mock_setup_logging, tmp_path):
        """A bare --screenshot writes under the configured screenshots directory."""
        settings = Settings(screenshots_dir=tmp_path / "shots")
        with patch("pagekit.main.get_settings", return_value=settings), \
                patch("pagekit.main.open_page", new_callable=AsyncMock, return_value=0) as mock_open:
            result = await async_main(["open", "https://intranet.example.com/home", "--screenshot"])

        assert result == 0
        screenshot = mock_open.await_args.kwargs["screenshot"]
        assert screenshot.parent == tmp_path / "shots"
        assert screenshot.name.startswith("intranet.example.com_")
        assert screenshot.suffix == ".png"
        assert (tmp_path / "shots").is_dir()

    @pytest.mark.asyncio
    async def test_open_screenshot_explicit_path(self, mock_setup_logging, tmp_path):
        """An explicit --screenshot path is used as given."""
        target = tmp_path / "page.png"
        with patch("pagekit.main.open_page", new_callable=AsyncMock, return_value=0) as mock_open:
            await async_main(["open", "https://example.com", "--screenshot", str(target)])

        assert mock_open.await_args.kwargs["screenshot"] == target


class TestOpenPage:
    """Test the open flow."""

    @pytest.mark.asyncio
    async def test_open_page_runs_requested_steps(self, tmp_path, capsys):
        """navigate, certificate check, cookies and screenshot run in order."""
        driver = MagicMock()
        driver.__aenter__ = AsyncMock(return_value=driver)
        driver.__aexit__ = AsyncMock(return_value=None)
        driver.save_screenshot = AsyncMock()
        driver.get_page_url = AsyncMock(return_value="https://intranet.example.com/")
        driver.get_page_title = AsyncMock(return_value="Intranet")

        base_page = MagicMock()
        base_page.test_env = "qa"
        base_page.navigate_to = AsyncMock()
        base_page.verify_certificate = AsyncMock(return_value=True)
        base_page.set_mac_id_cookie = AsyncMock(return_value="00059a3c7800")

        screenshot = tmp_path / "page.png"
        with patch("pagekit.main.PlaywrightDriver", return_value=driver) as driver_class, \
                patch("pagekit.main.BasePage", return_value=base_page):
            result = await open_page(
                "https://intranet.example.com",
                device_cookies=True,
                verify_certificate=True,
                screenshot=screenshot,
            )

        assert result == 0
        driver_class.assert_called_once_with(headless=True)
        base_page.navigate_to.assert_awaited_once_with("https://intranet.example.com")
        base_page.verify_certificate.assert_awaited_once()
        base_page.set_mac_id_cookie.assert_awaited_once_with(None)
        driver.save_screenshot.assert_awaited_once_with(screenshot)
        driver.__aexit__.assert_awaited_once()

        output = capsys.readouterr().out
        assert "Page summary" in output
        assert "00059a3c7800" in output

    @pytest.mark.asyncio
    async def test_open_page_skips_optional_steps(self):
        """Only navigation happens without flags."""
        driver = MagicMock()
        driver.__aenter__ = AsyncMock(return_value=driver)
        driver.__aexit__ = AsyncMock(return_value=None)
        driver.get_page_url = AsyncMock(return_value="https://example.com/")
        driver.get_page_title = AsyncMock(return_value="Example")

        base_page = MagicMock()
        base_page.test_env = "qa"
        base_page.navigate_to = AsyncMock()
        base_page.verify_certificate = AsyncMock()
        base_page.set_mac_id_cookie = AsyncMock()

        with patch("pagekit.main.PlaywrightDriver", return_value=driver), \
                patch("pagekit.main.BasePage", return_value=base_page):
            await open_page("https://example.com")

        base_page.verify_certificate.assert_not_awaited()
        base_page.set_mac_id_cookie.assert_not_awaited()
