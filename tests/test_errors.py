from mailchimp import errors


def test_cast_error_by_name():
    error = errors.cast_error({'status': 'error', 'code': -1, 'name': 'Invalid_Key', 'message': 'Invalid API key'})
    assert isinstance(error, errors.InvalidKeyError)
    assert str(error) == 'Invalid API key'
    assert error.name == 'Invalid_Key'


def test_cast_error_by_code():
    error = errors.cast_error({'error': 'Invalid MailChimp List ID: 42', 'code': 200})
    assert isinstance(error, errors.ListDoesNotExistError)
    assert error.code == 200
    assert error.name == 'List_DoesNotExist'


def test_cast_error_unknown_code_falls_back_to_error():
    error = errors.cast_error({'error': 'You must specify a name value for the folderAdd method', 'code': -90})
    assert type(error) is errors.Error
    assert error.code == -90


def test_cast_error_unexpected_shape():
    error = errors.cast_error(['not', 'an', 'error'])
    assert type(error) is errors.Error
    assert str(error).startswith('We received an unexpected error')


def test_every_error_is_an_error():
    for cls in errors.ERROR_MAP.values():
        assert issubclass(cls, errors.Error)
    for name in errors.CODE_MAP.values():
        assert name in errors.ERROR_MAP
