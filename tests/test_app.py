"""Application factory and maintenance script tests."""
import importlib.util
import os

import pytest

from app import create_app
from app.config import TestConfig
from app.models import User
from app.services import store

SCRIPT = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
                      'scripts', 'make_admin.py')


def load_make_admin():
    spec = importlib.util.spec_from_file_location('make_admin', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture()
def file_config(tmp_path):
    class FileConfig(TestConfig):
        TESTING = False
        basedir = str(tmp_path)
        SQLALCHEMY_DATABASE_URI = 'sqlite:///' + str(tmp_path / 'instance' / 'board.db')
    return FileConfig


def test_instance_folder_follows_config(tmp_path, file_config):
    create_app(file_config)
    assert (tmp_path / 'instance').is_dir()
    assert (tmp_path / 'instance' / 'board.db').exists()


def add_user(config_class, username):
    app = create_app(config_class)
    with app.app_context():
        store.add_user(User(first_name='Alice', last_name='Liddell', username=username,
                            password_hash='x'))


def test_make_admin_promotes(file_config, capsys):
    add_user(file_config, 'alice')
    make_admin = load_make_admin()

    assert make_admin.main(['make_admin.py', 'alice', 'admin'], file_config) == 0
    assert 'alice promoted to admin' in capsys.readouterr().out

    assert make_admin.main(['make_admin.py', 'alice', 'admin'], file_config) == 0
    assert 'alice is already admin' in capsys.readouterr().out


def test_make_admin_reports_the_failure(file_config, capsys, monkeypatch):
    add_user(file_config, 'alice')
    make_admin = load_make_admin()

    assert make_admin.main(['make_admin.py', 'ghost', 'member'], file_config) == 1
    assert 'Could not promote ghost' in capsys.readouterr().out

    # the user exists but the update changes nothing
    monkeypatch.setattr(store, 'update_user_flag', lambda username, flag: 0)
    assert make_admin.main(['make_admin.py', 'alice', 'member'], file_config) == 1
    out = capsys.readouterr().out
    assert 'There was a problem updating your membership.' in out
    assert 'No user named' not in out


def test_make_admin_usage(capsys):
    make_admin = load_make_admin()
    assert make_admin.main(['make_admin.py']) == 2
    assert make_admin.main(['make_admin.py', 'alice', 'owner']) == 2
    assert 'Usage' in capsys.readouterr().out
