# tfproviderdocs

A command-line checker for Terraform Provider documentation. It looks at a
provider codebase's documentation directories and files and reports problems
before they reach the Terraform Registry.

## Installation

```
pip install .
```

## Usage

Run a check from inside a provider directory such as `terraform-provider-example`:

```
tfproviderdocs check
```

To check a codebase somewhere else, give its path:

```
tfproviderdocs check /path/to/terraform-provider-example
```

To print the version:

```
tfproviderdocs version
```

`tfproviderdocs --help` lists the commands, and `tfproviderdocs check -help`
shows the options of the check command.

### What is checked

- The directory layout. The tool accepts the Registry layout (`docs/`,
  `docs/data-sources/`, `docs/guides/`, `docs/resources/`) and the legacy layout
  (`website/docs/`, `website/docs/d/`, `website/docs/guides/`, `website/docs/r/`).
  Either layout may also hold CDK for Terraform documentation under
  `cdktf/<language>/`, for the languages `csharp`, `go`, `java`, `python` and
  `typescript`. Any other directory fails the check, and so does a codebase that
  mixes the Registry subdirectories with the legacy layout (a lone `docs/`
  directory beside the legacy layout is allowed).
- The Registry storage limits: fewer than 2000 documentation files (CDK for
  Terraform files are not counted), and each file smaller than 500000 bytes.
- File extensions. The Registry layout needs `.md`. The legacy layout also
  accepts `.markdown`, `.html.md` and `.html.markdown`.
- YAML frontmatter fields (`description`, `layout`, `page_title`,
  `sidebar_current`, `subcategory`). Each kind of page requires some fields and
  forbids others; for example, Registry pages must not have `layout` or
  `sidebar_current`, and index pages must not have `subcategory`.
- If a provider schema is given, every data source and resource has a
  documentation file and every file matches a data source or resource.
- Optionally, the contents of resource pages: the title, the example,
  argument, attribute and import sections, and the order of schema attributes.

### Options

Each option may be written with one dash or two.

```
-log-level=[TRACE|DEBUG|INFO|WARN|ERROR]   Log output level (default INFO).
-allowed-guide-subcategories               Comma separated list of allowed guide subcategories.
-allowed-guide-subcategories-file          Newline separated file of allowed guide subcategories.
-allowed-resource-subcategories            Comma separated list of allowed resource subcategories.
-allowed-resource-subcategories-file       Newline separated file of allowed resource subcategories.
-enable-contents-check                     (Experimental) Enable contents checking.
-ignore-cdktf-missing-files                Skip file matching for CDK for Terraform documentation.
-ignore-file-mismatch-data-sources         Data sources whose extra files are ignored.
-ignore-file-mismatch-resources            Resources whose extra files are ignored.
-ignore-file-missing-data-sources          Data sources whose missing files are ignored.
-ignore-file-missing-resources             Resources whose missing files are ignored.
-provider-name                             Provider short name, e.g. example.
-provider-source                           Provider source address, e.g. registry.terraform.io/example/example.
-providers-schema-json                     Path to `terraform providers schema -json` output.
-require-guide-subcategory                 Require a guide subcategory.
-require-resource-subcategory              Require a data source and resource subcategory.
-require-schema-ordering                   Require alphabetically ordered attribute lists.
```

A subcategories file, when given, takes the place of the comma separated list.

If you don't pass `-provider-name`, the tool takes the last part of
`-provider-source`. Failing that, it uses the `terraform-provider-*` name of
the checked directory.

For enhanced validation against the provider schema:

```
terraform providers schema -json > schema.json
tfproviderdocs check -providers-schema-json schema.json -provider-source registry.terraform.io/example/example
```

The schema file's `format_version` must be at least 0.1 and below 2.0. The
provider is looked up by its source address first, then by its name.

The command exits with status 0 when every check passes and 1 otherwise,
printing the errors it found. Log output goes to standard error.

## Library use

The checks can also be called from Python:

```python
from tfproviderdocs.check.directory import get_directories
from tfproviderdocs.check.file import CheckError
from tfproviderdocs.check.runner import Check

directories = get_directories("/path/to/terraform-provider-example")
try:
    Check().run(directories)
except CheckError as err:
    print(err)
```

`get_directories` groups the documentation files of a codebase by directory.
`Check.run` raises `CheckError` for layout and file-count problems, and
`MultiCheckError` (a `CheckError`) listing every other failure, sorted.
Single pages can be checked with the classes in `tfproviderdocs.check.registry`
and `tfproviderdocs.check.legacy`, and page contents with
`tfproviderdocs.contents.document.Document`.