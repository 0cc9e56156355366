REMOTE_INPUTS_PLACEHOLDER = "[path_to_remote_inputs]"
"""
Token in a job step that is replaced with the job's remote inputs path
"""

LOCAL_INPUTS_PLACEHOLDER = "[path_to_local_inputs]"
"""
Token in a job step that is replaced with the job's local inputs path
"""

LOCAL_OUTPUTS_PLACEHOLDER = "[path_to_local_outputs]"
"""
Token in a job step that is replaced with the job's local outputs path
"""

REMOTE_OUTPUTS_PLACEHOLDER = "[path_to_remote_outputs]"
"""
Token in a job step that is replaced with the job's remote outputs path
"""

OBJECT_DELIMITER = "/"
"""
Folder delimiter used in object names of the remote storage
"""

DEFAULT_CONTENT_TYPE = "application/octet-stream"
"""
Content type of uploaded objects whose type cannot be guessed from their name
"""

GCP_CREDENTIALS_FILE_VARIABLES = ("SERVICE_ACCOUNT", "GOOGLE_APPLICATION_CREDENTIALS")
"""
Environment variables that may hold a path to a Google service account JSON file
"""

GCP_CREDENTIALS_JSON_VARIABLES = ("SERVICE_ACCOUNT_JSON", "GOOGLE_APPLICATION_CREDENTIALS_JSON")
"""
Environment variables that may hold Google service account credentials as JSON
"""

MINIO_ENDPOINT_VARIABLE = "MINIO_ENDPOINT"
MINIO_ACCESS_KEY_VARIABLE = "MINIO_ACCESS_KEY"
MINIO_SECRET_KEY_VARIABLE = "MINIO_SECRET_KEY"

LOG_FORMAT = '%(asctime)s.%(msecs)06d: %(levelname)-8s@%(module)-12s: %(message)s'
"""
Format of ferry log records
"""

LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
"""
Date format of ferry log records
"""
