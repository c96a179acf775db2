"""Tests for plain-text report rendering."""

from datetime import date, datetime, timezone

from conftest import DAY_START, HOUR, make_sample
from weather_tools.weather import report
from weather_tools.weather.models import AlertRecord, ConditionSample, DailyBucket


def london_sample() -> ConditionSample:
    return ConditionSample(
        description="clear sky",
        temperature_c=18.3,
        feels_like_c=17.9,
        humidity=60,
        pressure_hpa=1012
    )


class TestCurrentReport:

    def test_contains_all_fields(self):
        text = report.render_current("London", london_sample())

        assert text == (
            "Current weather in London: clear sky "
            "(Temperature: 18.3°C, Feels like: 17.9°C, Humidity: 60%, Pressure: 1012 hPa)"
        )

    def test_rendering_is_deterministic(self):
        sample = london_sample()

        assert report.render_current("London", sample) == report.render_current("London", sample)

    def test_missing_description_uses_placeholder(self):
        sample = london_sample().model_copy(update={"description": None})

        assert "London: n/a (" in report.render_current("London", sample)

    def test_rounding(self):
        sample = london_sample().model_copy(update={"temperature_c": -0.04, "pressure_hpa": 1012.6})

        text = report.render_current("Oslo", sample)

        assert "Temperature: -0.0°C" in text
        assert "Pressure: 1013 hPa" in text


class TestForecastReport:

    def test_layout(self):
        buckets = [
            DailyBucket(day=date(2024, 1, 1), samples=[
                make_sample(DAY_START + 12 * HOUR, "clear sky", 18.3),
                make_sample(DAY_START + 15 * HOUR, "few clouds", 16.0),
            ]),
            DailyBucket(day=date(2024, 1, 2), samples=[
                make_sample(DAY_START + 24 * HOUR, "light rain", 9.5),
            ]),
        ]

        text = report.render_forecast("London", buckets)

        assert text == (
            "Weather forecast for London:\n"
            "\n"
            "Monday, January 01:\n"
            "  12:00: clear sky, 18.3°C (feels like 17.3°C)\n"
            "  15:00: few clouds, 16.0°C (feels like 15.0°C)\n"
            "\n"
            "Tuesday, January 02:\n"
            "  00:00: light rain, 9.5°C (feels like 8.5°C)"
        )

    def test_rendering_is_deterministic(self):
        buckets = [DailyBucket(day=date(2024, 1, 1), samples=[make_sample(DAY_START)])]

        assert report.render_forecast("X", buckets) == report.render_forecast("X", buckets)


class TestAlertsReport:

    def test_no_alerts_sentence(self):
        assert report.render_alerts("Miami", []) == "No weather alerts currently active for Miami."

    def test_alert_blocks(self):
        alerts = [
            AlertRecord(
                sender_name="NWS Miami",
                event="Heat Advisory",
                start=datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc),
                end=datetime(2024, 1, 1, 20, 0, tzinfo=timezone.utc),
                description="Hot."
            ),
            AlertRecord(event="Flood Watch"),
        ]

        text = report.render_alerts("Miami", alerts)

        assert text == (
            "Weather alerts for Miami:\n"
            "\n"
            "🚨 Heat Advisory\n"
            "   From: 2024-01-01 10:00 UTC\n"
            "   To: 2024-01-01 20:00 UTC\n"
            "   Source: NWS Miami\n"
            "   Description: Hot.\n"
            "\n"
            "🚨 Flood Watch\n"
            "   From: unknown\n"
            "   To: unknown\n"
            "   Source: n/a\n"
            "   Description: n/a"
        )


class TestMessages:

    def test_transport_messages_name_the_city(self):
        assert report.transport_error(report.CURRENT_SUBJECT, "Atlantis") == (
            "Error: Unable to fetch weather data for Atlantis. "
            "Please check the city name and try again."
        )

    def test_upgrade_message_differs_from_transport_message(self):
        assert report.ALERTS_REQUIRE_UPGRADE != report.transport_error(report.ALERTS_SUBJECT, "Miami")
        assert "premium" in report.ALERTS_REQUIRE_UPGRADE
