from chart_data import ChartData, FieldSpec


class DefaultChartInitializer:
    def create(self) -> ChartData:
        fields = [FieldSpec(name) for name in ("label", "series_a", "series_b")]
        records = [{spec.field: None for spec in fields} for _ in range(3)]
        return ChartData(fields=fields, records=records)
