"""
m4a song table locator Flask Server

Features:
- Multi-file ROM uploads
- Scans run in memory; nothing is written to disk
- JSON results in the same format as `m4a-songtable --json`
"""

from typing import Optional

from flask import Flask, request, jsonify

from werkzeug.utils import secure_filename

from m4a_songtable import __version__
from m4a_songtable.config import Config
from m4a_songtable.formats.gba import GbaRom
from m4a_songtable.output.report import SongTableResult, ScanReport

app = Flask(__name__)

# Configuration
app.config['MAX_CONTENT_LENGTH'] = 64 * 1024 * 1024  # 64MB max upload
app.config['SCAN_CONFIG'] = None


def get_scan_config() -> Config:
    """Load the scan configuration once per app."""
    config: Optional[Config] = app.config['SCAN_CONFIG']
    if config is None:
        config = Config.load(None)
        app.config['SCAN_CONFIG'] = config
    return config


def scan_upload(upload, config: Config) -> SongTableResult:
    """Scan one uploaded ROM."""
    name = secure_filename(upload.filename or '') or 'rom.gba'
    data = upload.read()

    if not data:
        return SongTableResult(name=name, error=f"{name} is empty")

    rom = GbaRom(data, name)
    return rom.locate(
        tolerance=config.match_tolerance,
        stride=config.alignment,
        displacement=config.table_pointer_displacement,
        resolve_pointer=config.resolve_pointer
    )


# ============== Routes ==============

@app.route('/api/locate', methods=['POST'])
def api_locate():
    """Locate the song table in each uploaded ROM."""
    if 'files' not in request.files:
        return jsonify({'error': 'No files uploaded'}), 400

    uploads = [f for f in request.files.getlist('files') if f.filename]
    if not uploads:
        return jsonify({'error': 'No files uploaded'}), 400

    config = get_scan_config()
    report = ScanReport([scan_upload(upload, config) for upload in uploads])

    return jsonify(report.to_dict())


@app.errorhandler(413)
def too_large(e):
    """Reject uploads over MAX_CONTENT_LENGTH with a JSON error."""
    limit = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
    return jsonify({'error': f'Upload exceeds {limit}MB limit'}), 413


@app.route('/api/docs')
def api_docs():
    """API documentation."""
    return jsonify({
        'name': 'm4a song table locator API',
        'version': __version__,
        'endpoints': {
            'POST /api/locate': {
                'description': 'Locate the song table pointer in one or more ROMs',
                'content_type': 'multipart/form-data',
                'fields': {'files': 'one or more ROM images'},
                'response': {
                    'results': [{
                        'name': 'string',
                        'found': 'bool',
                        'tablePointerOffset': 'number|null',
                        'songTableAddress': 'number|null',
                        'songTableOffset': 'number|null',
                        'error': 'string|null'
                    }],
                    'found': 'number',
                    'total': 'number'
                }
            },
            'GET /api/docs': {
                'description': 'This document'
            }
        },
        'limits': {
            'max_upload_size': f"{app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)} MB"
        }
    })


if __name__ == '__main__':
    print("=" * 60)
    print(f"m4a song table locator server v{__version__}")
    print("=" * 60)
    print("API: POST http://localhost:5000/api/locate")
    print("Docs: http://localhost:5000/api/docs")
    print("=" * 60)

    app.run(host='0.0.0.0', port=5000, debug=False, threaded=True)
