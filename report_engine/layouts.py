"""
Jinja2 layouts for the mock report renderer

DESIGN_LAYOUT produces the XML report design (template artifact),
OUTPUT_LAYOUT the plain-text summary standing in for rendered output.
Both are rendered with trim_blocks/lstrip_blocks, so block tags sit on
their own lines and inline conditionals use expressions.
"""

DESIGN_LAYOUT_NAME = "report_design.xml"
OUTPUT_LAYOUT_NAME = "report_output.txt"

DESIGN_LAYOUT = """\
<?xml version="1.0" encoding="UTF-8"?>
<report xmlns="http://www.eclipse.org/birt/2005/design">
  <property name="reportName">{{ request.report_name }}</property>
{% if request.library_path %}
  <library-include>
    <libraryPath>{{ request.library_path }}</libraryPath>
  </library-include>
{% endif %}
{% if request.data_source_name %}
  <data-sources>
    <data-source{{ xml_attrs(name=request.data_source_name, library=True) }}/>
  </data-sources>
{% endif %}
{% if request.dataset_names %}
  <data-sets>
{% for dataset in request.dataset_names %}
    <data-set{{ xml_attrs(name=dataset, library=True) }}/>
{% endfor %}
  </data-sets>
{% endif %}
{% if request.parameters %}
  <parameters>
{% for key, value in request.parameters.items() %}
    <parameter{{ xml_attrs(name=key, value=value) }}/>
{% endfor %}
  </parameters>
{% endif %}
{% if components is not none %}
  <body>
{% if components.title is not none %}
{% set title = components.title %}
    <label{{ xml_attrs(name="title", alignment=title.alignment, includeDate=title.include_date) }}>
{% if title.text is not none %}
      <text>{{ title.text }}</text>
{% endif %}
{% if title.font_size is not none %}
      <fontSize>{{ title.font_size }}</fontSize>
{% endif %}
    </label>
{% endif %}
{% for table in components.tables or [] %}
    <table{{ xml_attrs(name=table.title) }}>
{% if table.dataset_name %}
      <dataSet>{{ table.dataset_name }}</dataSet>
{% endif %}
{% if table.columns %}
      <columns>
{% for column in table.columns %}
        <column{{ xml_attrs(name=column.name, label=column.label, width=column.width, dataType=column.data_type, format=column.format_pattern, alignment=column.alignment) }}/>
{% endfor %}
      </columns>
{% endif %}
{% if table.enable_grouping and table.group_by_column %}
      <group{{ xml_attrs(column=table.group_by_column) }}/>
{% endif %}
{% if table.include_totals %}
      <totals/>
{% endif %}
    </table>
{% endfor %}
{% for chart in components.charts or [] %}
    <chart{{ xml_attrs(name=chart.title) }}>
{% if chart.chart_type %}
      <type>{{ chart.chart_type }}</type>
{% endif %}
{% if chart.dataset_name %}
      <dataSet>{{ chart.dataset_name }}</dataSet>
{% endif %}
{% if chart.category_column %}
      <categoryColumn>{{ chart.category_column }}</categoryColumn>
{% endif %}
{% if chart.value_column %}
      <valueColumn>{{ chart.value_column }}</valueColumn>
{% endif %}
{% if chart.width is not none or chart.height is not none %}
      <size{{ xml_attrs(width=chart.width, height=chart.height) }}/>
{% endif %}
{% if chart.show_legend is not none %}
      <showLegend>{{ chart.show_legend | as_text }}</showLegend>
{% endif %}
    </chart>
{% endfor %}
  </body>
{% if components.footer %}
  <footer>
    <text>{{ components.footer }}</text>
  </footer>
{% endif %}
{% if components.page_orientation or components.page_size %}
  <page-setup{{ xml_attrs(orientation=components.page_orientation, size=components.page_size) }}/>
{% endif %}
{% endif %}
</report>
"""

OUTPUT_LAYOUT = """\
{{ heavy_rule }}
REPORT - {{ request.report_name | upper }}
{{ heavy_rule }}

Format: {{ request.output_format | upper }}
{% if request.library_path %}
Library: {{ request.library_path }}
{% endif %}
{% if request.data_source_name %}
Data Source: {{ request.data_source_name }}
{% endif %}

{% if request.dataset_names %}
Datasets Used:
{% for dataset in request.dataset_names %}
  - {{ dataset }}
{% endfor %}

{% endif %}
{% if request.parameters %}
Parameters:
{% for key, value in request.parameters.items() %}
  {{ key }} = {{ value | as_text }}
{% endfor %}

{% endif %}
{% if components is not none %}
{% if title_heading %}

{{ light_rule }}
{{ title_heading }}
{{ light_rule }}

{% endif %}
{% for table in components.tables or [] %}
TABLE{{ ": " ~ table.title if table.title else "" }}
{% if table.dataset_name %}
Dataset: {{ table.dataset_name }}
{% endif %}
{% if table.columns %}
Columns: {{ table.columns | column_labels }}
{% endif %}
{% if table.enable_grouping and table.group_by_column %}
Grouped by: {{ table.group_by_column }}
{% endif %}
{% if table.include_totals %}
Totals: included
{% endif %}
[Mock Data Would Appear Here]

{% endfor %}
{% for chart in components.charts or [] %}
CHART{{ ": " ~ chart.title if chart.title else "" }}
{% if chart.chart_type %}
Type: {{ chart.chart_type }}
{% endif %}
{% if chart.category_column or chart.value_column %}
Category: {{ chart.category_column or "" }}, Value: {{ chart.value_column or "" }}
{% endif %}
[Mock Chart Would Appear Here]

{% endfor %}
{% if components.footer %}
Footer: {{ components.footer }}

{% endif %}
{% endif %}

{{ heavy_rule }}
Report generated successfully (Mock Implementation)
Note: no rendering engine is attached, component data is not bound
{{ heavy_rule }}
"""

DEFAULT_LAYOUTS = {
    DESIGN_LAYOUT_NAME: DESIGN_LAYOUT,
    OUTPUT_LAYOUT_NAME: OUTPUT_LAYOUT,
}
