"""Tests for the reader entry points."""

import io
import logging
from datetime import datetime, timezone

import pytest

from gpx_stream_reader.api import read, read_file, read_string, read_with_extensions
from gpx_stream_reader.parser import TrackPointExtension, TrackPointExtensions
from gpx_stream_reader.shared import (
    DiagnosticSeverity,
    EventParsingError,
    GpxError,
    InvalidChildElement,
    ReaderConfig,
)
from gpx_stream_reader.types import Fix, FixKind, GpxVersion, Link


class TestRead:
    """Test reading complete documents."""

    def test_wikipedia_example(self, fixture_path):
        with fixture_path("wikipedia_example.gpx").open("rb") as source:
            document = read(source)

        assert document.version is GpxVersion.GPX11
        assert document.creator == "Oregon 400t"
        assert document.metadata.links == [
            Link("http://www.garmin.com", "Garmin International")
        ]
        assert document.metadata.time == datetime(2009, 10, 17, 22, 58, 43, tzinfo=timezone.utc)
        assert document.routes == []

        assert len(document.tracks) == 1
        track = document.tracks[0]
        assert track.name == "Example GPX Document"
        assert len(track.segments) == 1
        assert [point.elevation for point in track.points()] == [4.46, 4.94, 6.87]
        assert all(point.coordinates == (-122.326897, 47.644548) for point in track.points())
        assert track.points()[-1].time == datetime(
            2009, 10, 17, 18, 37, 34, tzinfo=timezone.utc
        )
        assert track.multilinestring().length == 0.0

    def test_accuracy_fields(self, fixture_path):
        """Test precision fields and fix types of track points."""
        document = read_file(fixture_path("with_accuracy.gpx"))
        first, second, third = document.tracks[0].points()

        assert document.metadata.name == "20170412_CARDIO.gpx"
        assert document.tracks[0].name == "Cycling"

        assert first.fix == Fix(FixKind.DGPS, "dgps")
        assert (first.sat, first.hdop, first.vdop, first.pdop) == (4, 5.0, 6.2, 728.0)
        assert (first.dgps_age, first.dgpsid) == (1.0, 3)

        assert second.fix == Fix(FixKind.THREE_DIMENSIONAL, "3d")
        assert (second.sat, second.hdop, second.vdop, second.pdop) == (5, 3.6, 5.0, 619.1)
        assert (second.dgps_age, second.dgpsid) == (2.01, 4)

        assert third.fix == Fix(FixKind.OTHER, "rtk_float")
        assert third.sat is None

    def test_strava_route_example(self, fixture_path):
        document = read_file(str(fixture_path("strava_route_example.gpx")))
        metadata = document.metadata

        assert document.creator == "StravaGPX"
        assert metadata.name == "Afternoon Run"
        assert metadata.description == "Loop around the lake"
        assert metadata.author.name == "Jane Runner"
        assert metadata.author.email == "jane@example.com"
        assert metadata.author.link == Link("https://www.strava.com/athletes/1")
        assert metadata.copyright.author == "OpenStreetMap contributors"
        assert metadata.copyright.year == 2020
        assert metadata.copyright.license == "https://www.openstreetmap.org/copyright"
        assert metadata.links == [Link("https://www.strava.com/", "Strava", "text/html")]
        assert metadata.keywords == "running, lake"
        assert metadata.bounds.max_lon == -122.60

        assert [(w.name, w.symbol) for w in document.waypoints] == [("Start", "Flag, Blue")]

        route = document.routes[0]
        assert (route.name, route.number, route.type) == ("Lake Loop", 1, "running")
        assert [point.name for point in route.points] == ["A", "B"]

        track = document.tracks[0]
        assert (track.name, track.number) == ("Afternoon Run", 7)
        assert len(track.points()) == 2
        assert track.multilinestring().length == pytest.approx(0.0001 * 2 ** 0.5)
        assert route.linestring().length == pytest.approx(0.0001 * 2 ** 0.5)

    def test_empty_names(self, fixture_path):
        """Test empty free-text and numeric leaves."""
        document = read_file(fixture_path("empty_name_tag.gpx"))

        assert document.waypoints[0].name == ""
        assert document.waypoints[0].elevation is None
        assert document.tracks[0].name == ""
        assert document.tracks[0].segments[0].points == []

    def test_minimal(self):
        document = read(io.BytesIO(b"<gpx></gpx>"))
        assert document.version is GpxVersion.UNKNOWN
        assert document.metadata is None
        assert document.tracks == []
        assert document.routes == []

    def test_extensions_discarded(self, fixture_path):
        document = read_file(fixture_path("garmin_with_extensions.gpx"))
        assert all(point.extensions is None for point in document.tracks[0].points())

    def test_small_chunks(self, fixture_path):
        """Test the result does not depend on the read size."""
        path = fixture_path("strava_route_example.gpx")
        assert read_file(path, config=ReaderConfig(chunk_size=3)) == read_file(path)


class TestDiagnostics:
    """Test dropped values are reported on the document."""

    def test_dropped_elevation(self):
        document = read(io.BytesIO(
            b'<gpx version="1.1">\n<wpt lat="1" lon="2">\n<ele>abc</ele></wpt></gpx>'
        ))

        assert document.waypoints[0].elevation is None
        assert len(document.diagnostics) == 1
        entry = document.diagnostics[0]
        assert entry.severity is DiagnosticSeverity.WARNING
        assert entry.element == "ele"
        assert entry.line == 3
        assert entry.details["text"] == "abc"

    def test_clean_document(self, fixture_path):
        assert read_file(fixture_path("strava_route_example.gpx")).diagnostics == []

    def test_reporting_disabled(self):
        document = read_string(
            '<gpx><wpt lat="1" lon="2"><ele>abc</ele></wpt></gpx>',
            config=ReaderConfig(report_degraded_values=False),
        )
        assert document.diagnostics == []


class TestReadWithExtensions:
    """Test reads with a waypoint extension hook."""

    def test_track_point_extensions(self, fixture_path):
        with fixture_path("garmin_with_extensions.gpx").open("rb") as source:
            document = read_with_extensions(source, TrackPointExtensions)

        track = document.tracks[0]
        assert track.name == "2019-05-01 06:31:11 Tag"
        assert [len(segment.points) for segment in track.segments] == [2, 1]
        assert [point.extensions for point in track.points()] == [
            TrackPointExtension(atemp=21.5, hr=112, cad=78),
            TrackPointExtension(hr=115),
            None,
        ]
        assert track.points()[2].elevation == 862.0

    def test_read_string_with_extensions(self):
        document = read_string(
            '<gpx version="1.1"><wpt lat="1" lon="2"><extensions>'
            "<TrackPointExtension><hr>90</hr></TrackPointExtension>"
            "</extensions></wpt></gpx>",
            TrackPointExtensions,
        )
        assert document.waypoints[0].extensions.hr == 90


class TestReadString:
    """Test in-memory reads."""

    def test_str(self):
        document = read_string('<gpx version="1.0" creator="ünïcode"/>')
        assert document.version is GpxVersion.GPX10
        assert document.creator == "ünïcode"

    def test_bytes(self):
        assert read_string(b'<gpx version="1.1"/>').version is GpxVersion.GPX11


class TestFailures:
    """Test failures propagate as GPX errors."""

    def test_invalid_encoding(self, fixture_path):
        with pytest.raises(GpxError):
            read_file(fixture_path("badcharacter.xml"))

    def test_ill_formed(self):
        with pytest.raises(EventParsingError):
            read_string("<gpx><trk></gpx>")

    def test_empty_source(self):
        with pytest.raises(GpxError):
            read(io.BytesIO(b""))

    def test_structure_violation(self):
        with pytest.raises(InvalidChildElement):
            read_string("<gpx><trk><trkpt/></trk></gpx>")

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_file(tmp_path / "missing.gpx")


class TestLogging:
    """Test records emitted by a read."""

    def test_finished_record(self, caplog):
        config = ReaderConfig(correlation_id="abc-123")
        with caplog.at_level(logging.INFO, logger="gpx_stream_reader"):
            read_string('<gpx version="1.1"><trk/><trk/></gpx>', config=config)

        finished = [r for r in caplog.records if r.getMessage() == "Finished GPX read"]
        assert len(finished) == 1
        assert finished[0].tracks == 2
        assert finished[0].version == "1.1"
        assert finished[0].correlation_id == "abc-123"

    def test_failure_record(self, caplog):
        with caplog.at_level(logging.ERROR, logger="gpx_stream_reader"):
            with pytest.raises(InvalidChildElement):
                read_string("<gpx><bogus/></gpx>")

        assert [r.error for r in caplog.records] == ["InvalidChildElement"]
        assert caplog.records[0].element == "gpx"
