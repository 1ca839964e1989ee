from io import BytesIO

import pytest

from server import app

from .helpers import build_rom


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def upload(client, *files):
    data = {'files': [(BytesIO(content), name) for name, content in files]}
    return client.post('/api/locate', data=data, content_type='multipart/form-data')


def test_locate_single_rom(client):
    response = upload(client, ('firered.gba', build_rom()))
    assert response.status_code == 200

    report = response.get_json()
    assert report['total'] == 1
    assert report['found'] == 1
    result = report['results'][0]
    assert result['name'] == 'firered.gba'
    assert result['code'] == 'BPRE'
    assert result['tablePointerOffset'] == 0x228
    assert result['songTableOffset'] == 0x800


def test_locate_batch(client):
    response = upload(
        client,
        ('a.gba', build_rom()),
        ('b.gba', build_rom(pattern_offset=None)),
        ('c.gba', b''),
    )
    report = response.get_json()
    assert report['total'] == 3
    assert report['found'] == 1
    assert report['results'][1]['found'] is False
    assert report['results'][2]['error'] == 'c.gba is empty'


def test_locate_without_files(client):
    response = client.post('/api/locate', data={}, content_type='multipart/form-data')
    assert response.status_code == 400
    assert 'error' in response.get_json()


def test_docs(client):
    response = client.get('/api/docs')
    assert response.status_code == 200
    assert 'POST /api/locate' in response.get_json()['endpoints']
