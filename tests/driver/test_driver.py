"""Tests for driver functionality in RideShare."""

import pytest

from rideshare.errors import InvalidRatingError
from rideshare.models.driver import Driver
from rideshare.models.ride import Ride, RideType


@pytest.fixture
def driver():
    """Fixture for a driver with a 4.5 rating."""
    return Driver(1, "Test Driver", 4.5)


class TestDriver:
    """Test class for driver rides and earnings."""

    def test_driver_creation(self, driver):
        """Test that a driver starts with no rides."""
        assert driver.id == 1
        assert driver.name == "Test Driver"
        assert driver.rating == 4.5
        assert driver.ride_count == 0
        assert driver.rides == ()
        assert driver.total_earnings() == 0.0

    def test_default_rating(self):
        """Test that a new driver is rated 5.0 by default."""
        assert Driver(2, "New Driver").rating == 5.0

    def test_assign_ride(self, driver):
        """Test that an assigned ride counts toward earnings."""
        driver.assign_ride(Ride(1, "A", "B", 5.0, RideType.STANDARD))

        assert driver.ride_count == 1
        assert driver.total_earnings() == pytest.approx(12.5)

    def test_assign_none_is_ignored(self, driver):
        """Test that assigning a missing ride does nothing."""
        driver.assign_ride(None)

        assert driver.ride_count == 0

    def test_earnings_recomputed_after_each_assignment(self, driver):
        """Test that earnings always equal the sum of assigned fares."""
        rides = [
            Ride(1, "A", "B", 10.0, RideType.STANDARD),
            Ride(2, "C", "D", 10.0, RideType.PREMIUM),
            Ride(3, "E", "F", 10.0, RideType.ECONOMY),
            Ride(4, "G", "H", 3.3, RideType.PREMIUM),
        ]

        for ride in rides:
            driver.assign_ride(ride)
            assert driver.total_earnings() == pytest.approx(
                sum(r.fare() for r in driver.rides))

        assert driver.total_earnings() == pytest.approx(87.5 + 2.5 * 3.3 * 1.8)

    def test_rides_keep_assignment_order(self, driver):
        """Test that rides are listed in the order they were assigned."""
        for ride_id in (3, 1, 2):
            driver.assign_ride(Ride(ride_id, "A", "B", 1.0))

        assert [ride.id for ride in driver.rides] == [3, 1, 2]

    def test_rides_view_is_read_only(self, driver):
        """Test that the rides view cannot be used to add rides."""
        driver.assign_ride(Ride(1, "A", "B", 1.0))

        with pytest.raises(AttributeError):
            driver.rides.append(Ride(2, "C", "D", 1.0))

        assert driver.ride_count == 1


class TestDriverRating:
    """Test class for driver rating updates."""

    def test_update_rating(self, driver):
        """Test that the new rating is averaged with the current one."""
        result = driver.update_rating(5.0)

        assert result == pytest.approx(4.75)
        assert driver.rating == pytest.approx(4.75)

    def test_repeated_rating_averages_twice(self):
        """Test that the same rating applied twice moves the rating twice."""
        driver = Driver(1, "Test Driver", 3.0)

        driver.update_rating(5.0)
        driver.update_rating(5.0)

        assert driver.rating == pytest.approx(((3.0 + 5.0) / 2 + 5.0) / 2)
        assert driver.rating == pytest.approx(4.5)

    @pytest.mark.parametrize("rating", [1.0, 5.0])
    def test_rating_bounds_are_inclusive(self, driver, rating):
        """Test that the bounds themselves are accepted."""
        driver.update_rating(rating)

        assert driver.rating == pytest.approx((4.5 + rating) / 2)

    @pytest.mark.parametrize("rating", [0.5, 5.5, 0.0, -1.0, 5.01, 0.99])
    def test_invalid_rating(self, driver, rating):
        """Test that out of range ratings are rejected and change nothing."""
        with pytest.raises(InvalidRatingError) as excinfo:
            driver.update_rating(rating)

        assert excinfo.value.rating == rating
        assert "invalid rating" in str(excinfo.value).lower()
        assert driver.rating == 4.5


class TestDriverSummary:
    """Test class for the driver summary report."""

    def test_summary_without_rides(self, driver):
        """Test the summary of a driver with no rides."""
        summary = driver.summary()

        assert summary == {
            "id": 1,
            "name": "Test Driver",
            "rating": 4.5,
            "ride_count": 0,
            "total_earnings": 0.0,
            "rides": [],
        }

    def test_summary_with_rides(self, driver):
        """Test that the summary lists every assigned ride."""
        first = Ride(1, "Downtown", "Airport", 15.5, RideType.STANDARD)
        second = Ride(4, "City Center", "Suburbs", 22.7, RideType.PREMIUM)
        driver.assign_ride(first)
        driver.assign_ride(second)

        summary = driver.summary()

        assert summary["ride_count"] == 2
        assert summary["total_earnings"] == pytest.approx(first.fare() + second.fare())
        assert summary["rides"] == [first.details(), second.details()]

    def test_summary_has_no_side_effects(self, driver):
        """Test that building a summary leaves the driver unchanged."""
        driver.assign_ride(Ride(1, "A", "B", 2.0))

        driver.summary()
        driver.summary()

        assert driver.ride_count == 1
        assert driver.rating == 4.5
