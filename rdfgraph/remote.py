import logging
from contextlib import closing

import requests

from rdfgraph.graph import NTRIPLES, TURTLE

CONTENT_TYPES = {
    "text/turtle": TURTLE,
    "application/x-turtle": TURTLE,
    "application/n-triples": NTRIPLES,
    "text/plain": NTRIPLES,
}

ACCEPT = "text/turtle, application/n-triples;q=0.9, text/plain;q=0.5"


def load_from_url(graph, url, format=None, **kwargs):
    """
    Fetch a document and load it into graph.
    :param graph: the rdfgraph.Graph to fill
    :param url: document location
    :param format: NTRIPLES or TURTLE, taken from the Content-Type header when omitted
    :param kwargs: session (a requests.Session), timeout (seconds, default 30), headers
    :return: the graph
    """
    session = kwargs.pop("session", None) or requests
    timeout = kwargs.pop("timeout", 30)
    headers = {"Accept": ACCEPT}
    headers.update(kwargs.pop("headers", {}))
    if kwargs:
        raise TypeError("Unexpected keyword arguments: {}".format(", ".join(sorted(kwargs))))

    with closing(session.get(url, headers=headers, timeout=timeout)) as r:
        if not 200 <= r.status_code < 300:
            logging.error("Status {} fetching {}".format(r.status_code, url))
            r.raise_for_status()
            raise requests.HTTPError("Status {} fetching {}".format(r.status_code, url), response=r)
        if format is None:
            format = _format_from_content_type(r.headers.get("Content-Type", ""))
        text = r.text

    logging.debug("fetched {} characters from {} as {}".format(len(text), url, format))
    graph.load_from_string(format, text)
    return graph


def _format_from_content_type(content_type):
    mime = content_type.split(";")[0].strip().lower()
    try:
        return CONTENT_TYPES[mime]
    except KeyError:
        raise ValueError("Response content type not parsable {!r}".format(content_type))
