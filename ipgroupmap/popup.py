import html

from ipgroupmap.groups import GROUP_COLUMN

UNKNOWN = 'unknown'

# (label, column) in display order; the IP line is rendered separately, in bold.
POPUP_FIELDS = [
    ('Country', 'country_name'),
    ('Region', 'region_name'),
    ('City', 'city'),
    ('Time zone', 'time_zone'),
    ('Group', GROUP_COLUMN),
]


def display_value(value):
    """Empty strings read as 'unknown'; anything else is shown as-is."""
    return UNKNOWN if value == '' else value


def format_popup(record, escape=False):
    """
    Build the marker popup for one record (a row Series or a dict).
    Values are interpolated unescaped unless `escape` is set.
    """
    def show(value):
        value = str(display_value(value))
        return html.escape(value) if escape else value

    lines = [f"<b>IP: {show(record['ip'])}</b>"]
    lines += [f"{label}: {show(record[col])}" for label, col in POPUP_FIELDS]
    return '<br>'.join(lines)


def format_popups(records, escape=False):
    return [format_popup(row, escape=escape) for _, row in records.iterrows()]
