# Probe commands: exit zero only when the tool is installed
GIT_PROBE = "git help -g"
DOCKER_PROBE = "docker"
HEROKU_PROBE = "heroku --version"

# Manual download pages
GIT_WINDOWS_URL = "https://git-scm.com/download/win"
DOCKER_URLS = {
    "win32": "https://hub.docker.com/editions/community/docker-ce-desktop-windows",
    "darwin": "https://docs.docker.com/docker-for-mac/install/",
}
HEROKU_URL = "https://devcenter.heroku.com/articles/heroku-cli"

# Prompt and status messages
INSTALL_PROMPT = "Sorry, {dependency} is not installed on your system, Do you want to install it?"
INSTALLING = "Installing {dependency}"
INSTALL_SUCCESS = "You're good to go"
INSTALL_FAIL = "Something went wrong"
EMPTY_INPUT = "Can't be empty!"

# Generic messages
UNKNOWN_DEPENDENCY = "Unknown dependency: {dependency}"
UNSUPPORTED_OS = "Unsupported operating system: {os}"
