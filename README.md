# ghupdate

A small updater that looks up the latest release of a GitHub repository and
shows its version and changelog in a window. The library part can also list
releases and download release assets.

It has no dependencies outside the standard library. The window uses
`tkinter`, so a Python built with Tk support is needed to open it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
ghupdate
```

The command takes no options apart from `-h`/`--help`. When run, it:

1. creates an `update/` directory in the current working directory, if there
   is none, and writes its log to `update/update.log`;
2. prints the program version and author as JSON:

   ```
   {
       "author": "hly",
       "version": "0.0.1"
   }
   ```

3. opens the update window and waits until it is closed.

### The window

The window (titled `程序更新`) shows a current-version and a latest-version
label, a list of changelog lines, a progress bar and three buttons:

- **更新** (update) fetches the latest release of the configured repository in
  the background. When a release with a tag is found, the latest-version label
  shows its tag and the list shows its changelog lines (or `无更新日志` when
  the release has no notes). Failures are silent.
- **忽略该版本** (ignore this version) disables itself.
- **取消** (cancel), like closing the window, ends the program.

Clicking an entry in the changelog list only clears the selection.

## Library use

Look up the latest release of a repository:

```python
from ghupdate.request import ClientRequest

client = ClientRequest()
release = client.get_latest_release("https://github.com/owner/repo")
if release.tag_name:
    print(release.tag_name)
    for asset in release.assets:
        print(asset.name, asset.size, asset.browser_download_url)
```

`ClientRequest(opener=None, timeout=30.0)` uses `urllib.request.urlopen`
unless another opener with the same calling convention is given.

- `get_latest_release(url)` returns the newest `Release`, or an empty
  `Release` (its `tag_name` is `""`) when the request fails, the status is not
  200, or the answer holds no releases.
- `get_releases(url)` returns every release in the listing, or `[]` on
  failure.
- `download_asset(asset, destination, progress_cb=None)` writes the asset to
  `destination`. The callback is called after each chunk with the bytes
  downloaded so far and the total (from `Content-Length`, else `asset.size`).
  It returns `True` when finished. `cancel_download()` stops a running
  download; the call then returns `False` and the partial file is removed.
  A status other than 200 raises `ConnectionError`; network errors are not
  caught.

`Asset` (`name`, `size`, `updated_at`, `browser_download_url`) and `Release`
(`tag_name`, `assets`, `body`) are dataclasses.

`url_convert` turns a repository page address into the address of its
releases API. It returns an empty string when the address has no
`github.com/` in it:

```python
from ghupdate.request import url_convert

url_convert("https://github.com/owner/repo/")
# 'http://api.github.com/repos/owner/repo/releases'
```

`parse_releases` reads the JSON text of a releases listing into a list of
`Release` objects. Text that is not JSON, or not a JSON array, gives an empty
list; an entry that is not an object, or a field of the wrong type, raises
`ValueError`. Missing fields take empty defaults.

### Changelogs

`ghupdate.home.parse_logs` splits a release body into the lines to show:

- it accepts both `\r\n` and `\n` line endings;
- it drops any line that contains `更新日志` ("changelog");
- it strips spaces and tabs from both ends of each line;
- it skips lines that end up empty.

`Home.render_logs(release)` applies a release to the window's state in the
same way the update button does; `Home.show()` opens the window.

`ghupdate.main.version_document(version, author)` builds the JSON document
that the command prints.

## What it does not do

- The current-version and latest-version labels start with fixed texts
  (`v1.0.1` and `v2.0.0`); the program does not know its own installed
  version beyond what `version_document` prints.
- The window does not download or install anything: the progress bar stays
  at zero. Downloading is available only through
  `ClientRequest.download_asset`.
- "Ignore this version" is not remembered between runs.
- The repository the window checks is fixed unless `Home` is built with
  another `repository_url`; the command has no option for it.