# catalog/sa/repositories/series.py
from typing import List

from catalog.models.series import Series as SeriesModel
from ..models import Series
from .base import EntityRepository

class SeriesRepository(EntityRepository[SeriesModel, Series]):
    model_class = SeriesModel
    row_class = Series
    kind = "Series"
    # library_id is fixed at creation
    mutable_fields = ('name', 'url', 'file_last_modified')
    search_filters = {
        'library_ids': Series.library_id,
    }

    def find_all_by_library_id(self, library_id: str) -> List[SeriesModel]:
        """
        Get all series belonging to a library.
        """
        rows = self.session.query(Series).filter(Series.library_id == library_id).all()
        return [self._to_model(row) for row in rows]

    def find_all_id_by_library_id(self, library_id: str) -> List[str]:
        return [
            series_id for (series_id,) in
            self.session.query(Series.id).filter(Series.library_id == library_id).all()
        ]
