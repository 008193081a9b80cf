# apps/results_page/results.py

import logging

logger = logging.getLogger(__name__)

ROW_COUNT = 3


def fetch_results(eventid, userno):
    """
    Builds the rows shown in the results table for one selector pair.

    Stands in for the real data source; swap it through
    SELECTOR_RESULTS_PROVIDER.
    """
    logger.info(f"Searching with eventid: {eventid}, userno: {userno}")

    rows = []
    for i in range(1, ROW_COUNT + 1):
        rows.append({
            'id': i,
            'name': f"Item {i}",
            'value': f"Event: {eventid}, User: {userno}, Data: {i}",
        })
    return rows
