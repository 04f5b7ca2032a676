import pandas as pd
import pytest

HEADER = ['ip', 'country_code', 'country_name', 'region_code', 'region_name', 'city',
          'zip_code', 'time_zone', 'latitude', 'longitude', 'metro_code']


def make_row(ip, country_name='', latitude='10.0', longitude='20.0', **extra):
    row = dict.fromkeys(HEADER, '')
    row.update(ip=ip, country_name=country_name, latitude=latitude, longitude=longitude)
    row.update(extra)
    return row


@pytest.fixture
def write_csv(tmp_path):
    """Write rows to a CSV in tmp_path and return its path."""
    def _write(rows, name='records.csv', columns=None):
        path = tmp_path / name
        pd.DataFrame(rows, columns=columns or HEADER).to_csv(path, index=False)
        return path
    return _write


@pytest.fixture
def three_records(write_csv):
    return write_csv([
        make_row('1.2.3.4', 'Testland', '48.85', '2.35', city='Alpha'),
        make_row('5.6.7.8', '', '-33.86', '151.20'),
        make_row('9.9.9.9', 'Nowhere', '0.0', '0.0', time_zone='Etc/UTC'),
    ])


@pytest.fixture
def records_frame():
    rows = [make_row(f"10.0.0.{i}", country_name=f"Country {i % 7}", latitude=str(i % 80), longitude=str(i)) for i in range(60)]
    frame = pd.DataFrame(rows, columns=HEADER)
    frame['latitude'] = frame['latitude'].astype(float)
    frame['longitude'] = frame['longitude'].astype(float)
    return frame
