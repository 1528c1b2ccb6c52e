"""helm-docs -- extract documentation data from Helm charts.

Core modules:
    comments      -- Values-file comment extractor. Line-oriented state machine
                     (SEARCHING / ACCUMULATING) mapping `# key -- text` comments
                     and `# @default -- text` overrides to configuration keys.
    chart_info    -- Chart.yaml / requirements.yaml / values.yaml readers and
                     parse_chart_information, which combines them per chart.
    values_table  -- Flattens parsed values into dotted keys and joins them
                     with extracted descriptions (key, type, default, description).
    batch         -- Parallel parsing of several charts. Failed charts are
                     logged and skipped; the rest continue.
    config        -- Configuration via pydantic-settings (.env + env vars) and
                     loguru setup.
    cli           -- Click CLI entry point. CLI flags passed as kwargs to
                     DocsConfig (no env pollution).
    models        -- Enums and dataclasses shared by the modules above.
    errors        -- Exception hierarchy.
"""
