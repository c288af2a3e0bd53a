"""Errors raised by the command implementations."""


class CommandError(Exception):
    """Base class for errors reported to the user by a command."""

    message = "The request could not be completed."

    def __init__(self, message=None):
        self.message = type(self).message if message is None else message
        super().__init__(self.message)


class NoApiUrlSetError(CommandError):
    message = (
        "An API target is not set. Please target the location of your server "
        "with `credhub api --server api.example.com` to continue."
    )


class NoMatchingCredentialsFoundError(CommandError):
    message = "No credentials exist which match the provided parameters."


class MissingDeleteParametersError(CommandError):
    message = "A name or path must be provided. Please update and retry your request."


class BulkDeleteFailureError(CommandError):
    message = (
        "Some or all of the credential under the provided path could not be deleted. "
        "Please refer to the error output."
    )


class MissingGetParametersError(CommandError):
    message = "A name or ID must be provided. Please update and retry your request."


class GetVersionsAndIDIncompatibleParametersError(CommandError):
    message = "The --versions flag and --id flag are incompatible."


class GetVersionAndKeyError(CommandError):
    message = "The --versions flag and --key flag are incompatible."


class OutputJSONAndQuietError(CommandError):
    message = "The --output-json flag and --quiet flag are incompatible."


class GenerateEmptyTypeError(CommandError):
    message = (
        "A type must be specified when generating a credential. Valid types include "
        "'password', 'user', 'certificate', 'ssh' and 'rsa'."
    )


class UserNameOnlyValidForUserTypeError(CommandError):
    message = "Username parameter is only valid for user type credentials."


class InvalidJSONMetadataError(CommandError):
    message = (
        "The argument for --metadata is not a valid json object. "
        "Please update and retry your request."
    )


class ServerDoesNotSupportMetadataError(CommandError):
    message = (
        "The --metadata flag is not supported for this version of the credhub server "
        "(requires >= 2.6.x). Please remove the flag and retry your request."
    )


class UnsupportedServerVersionError(CommandError):
    message = "credhub server version <2.0 not supported"


class MissingPathError(CommandError):
    message = "A path must be provided. Please update and retry your request."