from storages.backends.gcloud import GoogleCloudStorage


class GoogleCloudMediaStorage(GoogleCloudStorage):
    """
    Bucket for user uploads. Objects are public and addressed by plain
    storage.googleapis.com URLs, so no signed URLs are generated.
    The bucket name comes from STORAGES["default"]["OPTIONS"].
    """
    file_overwrite = False
    querystring_auth = False
    default_acl = None
