"""Flat text file storage for vehicle records.

Each line of the inventory file holds one vehicle as

    make,model,year,mileage,price,chassis_number,status

with no header, quoting or escaping.
"""

import os
import shutil
import logging
import tempfile
import threading
from typing import Callable, Iterator, List, Optional, Tuple

from dealership.models.vehicle import Vehicle

logger = logging.getLogger(__name__)

FIELD_COUNT = 7
CHASSIS_INDEX = 5


class StorageError(Exception):
    """Raised when the inventory file cannot be read, parsed or replaced."""
    pass


class RecordNotFoundError(LookupError):
    """Raised when an update targets a chassis number that is not stored."""
    pass


def serialize_vehicle(vehicle: Vehicle) -> str:
    """Render a vehicle as a single inventory line (without the newline)."""
    return ",".join([
        vehicle.make,
        vehicle.model,
        str(vehicle.year),
        str(vehicle.mileage),
        str(float(vehicle.price)),
        vehicle.chassis_number,
        vehicle.status,
    ])


def split_line(line: str) -> List[str]:
    """Split an inventory line into its fields, ignoring trailing empty fields."""
    parts = line.split(",")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_fields(parts: List[str]) -> Vehicle:
    """
    Build a vehicle from the seven fields of a well-formed line.

    Raises:
        ValueError: If a numeric field cannot be parsed
    """
    make, model, year, mileage, price, chassis_number, status = [p.strip() for p in parts]
    return Vehicle(
        make=make,
        model=model,
        year=int(year),
        mileage=int(mileage),
        price=float(price),
        chassis_number=chassis_number,
        status=status,
    )


class TxtVehicleRepository:
    """
    Vehicle repository backed by a comma-delimited text file.

    The repository must be opened before use, either explicitly or as a
    context manager. Every mutation runs under ``lock``; callers that need a
    read-then-write sequence to be atomic can hold the same (reentrant) lock.
    """

    def __init__(self, file_path: str):
        self.file_path = file_path
        self.lock = threading.RLock()
        self._is_open = False

    def __enter__(self) -> "TxtVehicleRepository":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def open(self) -> None:
        """Create the inventory file if needed and mark the store usable."""
        with self.lock:
            if self._is_open:
                return
            try:
                directory = os.path.dirname(os.path.abspath(self.file_path))
                os.makedirs(directory, exist_ok=True)
                if not os.path.exists(self.file_path):
                    with open(self.file_path, "a", encoding="utf-8"):
                        pass
                    logger.info(f"Created inventory file {self.file_path}")
            except OSError as e:
                raise StorageError(f"Cannot open inventory file {self.file_path}: {str(e)}")
            self._is_open = True

    def close(self) -> None:
        with self.lock:
            self._is_open = False

    def _require_open(self) -> None:
        if not self._is_open:
            raise StorageError("Inventory store is not open")

    def _read_lines(self) -> Iterator[str]:
        """Yield lines of the inventory file without their line endings."""
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for line in f:
                    yield line.rstrip("\r\n")
        except OSError as e:
            raise StorageError(f"Error reading file: {self.file_path}: {str(e)}")

    def _scan(self) -> Iterator[Vehicle]:
        """Yield every well-formed record in file order."""
        self._require_open()
        for number, line in enumerate(self._read_lines(), 1):
            parts = split_line(line)
            if len(parts) != FIELD_COUNT:
                continue
            try:
                yield parse_fields(parts)
            except ValueError as e:
                raise StorageError(
                    f"Invalid number format in file {self.file_path} at line {number}: {str(e)}")

    def find_by_chassis_number(self, chassis_number: str) -> Optional[Vehicle]:
        """
        Find the vehicle with the given chassis number.

        Args:
            chassis_number: Chassis number to look up

        Returns:
            Vehicle: The first matching record in file order, or None

        Raises:
            ValueError: If chassis_number is blank
            StorageError: If the file cannot be read or parsed
        """
        if not chassis_number or not chassis_number.strip():
            raise ValueError("Chassis number cannot be null or empty")

        with self.lock:
            for vehicle in self._scan():
                if vehicle.chassis_number == chassis_number:
                    return vehicle
        return None

    def save(self, vehicle: Vehicle) -> None:
        """Append a new record. Uniqueness is the caller's responsibility."""
        if vehicle is None:
            raise ValueError("Vehicle can not be null")

        with self.lock:
            self._require_open()
            try:
                with open(self.file_path, "a", encoding="utf-8") as f:
                    f.write(serialize_vehicle(vehicle) + "\n")
            except OSError as e:
                raise StorageError(f"Error writing to file: {self.file_path}: {str(e)}")
        logger.debug(f"Appended vehicle {vehicle.chassis_number} to {self.file_path}")

    def update(self, vehicle: Vehicle) -> None:
        """
        Replace the stored record that has the same chassis number.

        Raises:
            ValueError: If the vehicle or its chassis number is missing
            RecordNotFoundError: If no stored line has that chassis number
            StorageError: If the file cannot be rewritten
        """
        if vehicle is None or not vehicle.chassis_number or not vehicle.chassis_number.strip():
            raise ValueError("Vehicle or chassis number cannot be null or empty")

        new_line = serialize_vehicle(vehicle)

        def replace(parts: List[str], line: str) -> Tuple[Optional[str], bool]:
            if parts[CHASSIS_INDEX].strip() == vehicle.chassis_number:
                return new_line, True
            return line, False

        with self.lock:
            if not self._rewrite(replace, require_match=True):
                raise RecordNotFoundError(
                    f"Vehicle with chassis number {vehicle.chassis_number} not found")

    def delete(self, chassis_number: str) -> None:
        """Remove every line with the given chassis number; no match is a no-op."""
        if not chassis_number or not chassis_number.strip():
            raise ValueError("chassis number cannot be null or empty")

        def omit(parts: List[str], line: str) -> Tuple[Optional[str], bool]:
            if parts[CHASSIS_INDEX].strip() == chassis_number:
                return None, True
            return line, False

        with self.lock:
            self._rewrite(omit)

    def _rewrite(self, transform: Callable[[List[str], str], Tuple[Optional[str], bool]],
                 require_match: bool = False) -> bool:
        """
        Rewrite the inventory through a temporary file, then swap it in.

        ``transform`` receives the split fields and the raw line of every
        well-formed line and returns the line to write (None to omit it) and
        whether the line matched. Malformed lines are dropped.

        Returns:
            bool: True if any line matched
        """
        self._require_open()
        directory = os.path.dirname(os.path.abspath(self.file_path))
        prefix = "temp_" + os.path.basename(self.file_path) + "."
        matched = False
        dropped = 0

        try:
            tmp = tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=prefix, delete=False)
        except OSError as e:
            raise StorageError(f"Cannot create temporary file in {directory}: {str(e)}")

        try:
            with tmp:
                for line in self._read_lines():
                    parts = split_line(line)
                    if len(parts) != FIELD_COUNT:
                        dropped += 1
                        continue
                    output, hit = transform(parts, line)
                    matched = matched or hit
                    if output is not None:
                        tmp.write(output + "\n")

            if require_match and not matched:
                os.remove(tmp.name)
                return False

            shutil.copymode(self.file_path, tmp.name)
            os.replace(tmp.name, self.file_path)
        except (OSError, StorageError) as e:
            if os.path.exists(tmp.name):
                os.remove(tmp.name)
            if isinstance(e, StorageError):
                raise
            raise StorageError(f"Failed to replace {self.file_path} with rewritten contents: {str(e)}")

        if dropped:
            logger.warning(f"Dropped {dropped} malformed line(s) while rewriting {self.file_path}")
        logger.debug(f"Rewrote {self.file_path}")
        return matched

    def find_all(self) -> List[Vehicle]:
        """Return every well-formed record in file order."""
        with self.lock:
            return list(self._scan())

    def find_by_filter(self, make: Optional[str], model: Optional[str],
                       min_year: int, max_year: int,
                       min_mileage: int, max_mileage: int,
                       min_price: float, max_price: float,
                       status: Optional[str]) -> List[Vehicle]:
        """
        Return records matching every criterion.

        Text criteria match case-insensitively and are ignored when blank.
        Numeric bounds are inclusive and always applied.
        """
        def text_matches(criterion: Optional[str], value: str) -> bool:
            if criterion is None or not criterion.strip():
                return True
            return value.lower() == criterion.strip().lower()

        with self.lock:
            return [
                v for v in self._scan()
                if text_matches(make, v.make)
                and text_matches(model, v.model)
                and min_year <= v.year <= max_year
                and min_mileage <= v.mileage <= max_mileage
                and min_price <= v.price <= max_price
                and text_matches(status, v.status)
            ]
