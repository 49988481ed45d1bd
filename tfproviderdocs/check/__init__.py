"""Directory, file, frontmatter, schema-matching and contents checks for provider documentation."""