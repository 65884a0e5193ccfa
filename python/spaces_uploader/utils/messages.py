"""ログメッセージのテンプレート"""

MESSAGES = {
    "UploadingFiles": "Uploading files from {0} to '{1}' in bucket {2}",
    "UploadingFile": "Uploading {0} to {1}",
    "UploadingFileTyped": "Uploading {0} to {1} (Content-Type: {2})",
    "FileUploadProgress": "Uploaded {0} of {1} ({2}%)",
    "FileUploadCompleted": "Upload of {0} to {1} completed",
    "FileUploadFailed": "Upload of {0} failed: {1}",
    "FileNotFound": "No files found in {0} matching the given patterns",
    "TaskCompleted": "Upload completed: {0} file(s) uploaded",
    "DryRun": "[DRY RUN]: Would upload {0} to {1}/{2}",
}


def loc(key: str, *args) -> str:
    """テンプレートに引数を埋め込む"""
    return MESSAGES[key].format(*args)
