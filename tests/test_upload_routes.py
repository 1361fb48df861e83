"""Tests for image upload and serving"""

import io
import os


PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


def upload(client, filename, headers=None, content=PNG_BYTES):
    return client.post(
        '/api/upload',
        data={'image': (io.BytesIO(content), filename)},
        headers=headers or {},
        content_type='multipart/form-data'
    )


def test_upload_requires_auth(client, app):
    response = upload(client, 'photo.png')
    assert response.status_code == 401
    assert not os.path.exists(app.config['UPLOAD_FOLDER'])


def test_upload_stores_file_and_returns_url(client, app, auth_headers):
    response = upload(client, 'My Photo.PNG', headers=auth_headers)

    assert response.status_code == 200
    image_url = response.get_json()['imageUrl']
    assert image_url.startswith('/uploads/')
    assert image_url.endswith('.png')

    stored_name = image_url.rsplit('/', 1)[1]
    stored_path = os.path.join(app.config['UPLOAD_FOLDER'], stored_name)
    with open(stored_path, 'rb') as f:
        assert f.read() == PNG_BYTES

    served = client.get(image_url)
    assert served.status_code == 200
    assert served.data == PNG_BYTES


def test_upload_names_are_sanitised(client, auth_headers):
    image_url = upload(client, '../../etc/evil.png', headers=auth_headers).get_json()['imageUrl']
    stored_name = image_url.rsplit('/', 1)[1]
    assert '/' not in stored_name
    assert '..' not in stored_name


def test_upload_rejects_other_file_types(client, auth_headers):
    response = upload(client, 'script.exe', headers=auth_headers)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Invalid file type'


def test_upload_without_file(client, auth_headers):
    response = client.post('/api/upload', data={}, headers=auth_headers, content_type='multipart/form-data')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'No file uploaded'


def test_upload_too_large(client, app, auth_headers):
    app.config['MAX_CONTENT_LENGTH'] = 1024 * 1024
    response = upload(client, 'big.png', headers=auth_headers, content=b'\x00' * (2 * 1024 * 1024))
    assert response.status_code == 413
    assert 'too large' in response.get_json()['message']


def test_missing_upload_is_not_found(client):
    assert client.get('/uploads/nothing-here.png').status_code == 404


def test_upload_rejects_svg(client, app, auth_headers):
    svg = b'<svg xmlns="http://www.w3.org/2000/svg"><script>alert(1)</script></svg>'
    response = upload(client, 'logo.svg', headers=auth_headers, content=svg)
    assert response.status_code == 400
    assert response.get_json()['message'] == 'Invalid file type'
    assert not os.path.exists(app.config['UPLOAD_FOLDER'])
