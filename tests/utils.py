import os

BASE_PATH = os.path.abspath(os.path.dirname(__file__))
DATA_DIR = os.path.join(BASE_PATH, 'data')


def read_data(*path):
    with open(os.path.join(DATA_DIR, *path), 'rb') as fp:
        return fp.read()


def xml_response(rsps, method, url, *path, status=200, content_type="application/soap+xml"):
    rsps.add(method, url, body=read_data(*path), status=status, content_type=content_type)
