from .slots import MAX_CAPACITY, slot_to_time, InvalidSlotError


class Reservation:
    STATUS_CONFIRMED = "CONFIRMED"
    STATUS_CANCELLED = "CANCELLED"
    STATUS_NO_SHOW = "NO_SHOW"
    STATUS_COMPLETED = "COMPLETED"
    VALID_STATUSES = [STATUS_CONFIRMED, STATUS_CANCELLED, STATUS_NO_SHOW, STATUS_COMPLETED]

    def __init__(self, reservation_id, date_str, time_slot, party_size, name, phone="", email=None, notes=None,
                 status=STATUS_CONFIRMED, created_at=None, updated_at=None, start_time=None, end_time=None):
        self.id = reservation_id
        # Backend liefert teilweise ISO-Zeitstempel ("2025-06-25T00:00:00.000Z")
        self.date = (date_str or "")[:10]
        try: self.time_slot = int(time_slot)
        except (TypeError, ValueError): self.time_slot = 0
        try: self.party_size = int(party_size)
        except (TypeError, ValueError): self.party_size = 0
        self.name = name
        self.phone = phone or ""
        self.email = email
        self.notes = notes
        self.status = status if status in self.VALID_STATUSES else self.STATUS_CONFIRMED
        self.created_at = created_at
        self.updated_at = updated_at
        self.start_time = start_time
        self.end_time = end_time

    def __repr__(self):
        return f"<Reservation '{self.name}' (ID: {self.id}, {self.date} Slot {self.time_slot}, {self.party_size}P)>"

    @property
    def short_id(self):
        return str(self.id or "")[-8:]

    @property
    def time(self):
        try:
            return slot_to_time(self.time_slot)
        except InvalidSlotError:
            return slot_to_time(0)

    @property
    def is_deletable(self):
        return self.status == self.STATUS_CONFIRMED

    @classmethod
    def from_dict(cls, data):
        return cls(
            reservation_id=data.get('id'),
            date_str=data.get('date') or data.get('dateString'),
            time_slot=data.get('timeSlot'),
            party_size=data.get('partySize'),
            name=data.get('name'),
            phone=data.get('phone', ""),
            email=data.get('email'),
            notes=data.get('notes'),
            status=data.get('status', cls.STATUS_CONFIRMED),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
            start_time=data.get('startTime'),
            end_time=data.get('endTime')
        )

    def to_dict(self):
        return {
            "id": self.id, "date": self.date, "timeSlot": self.time_slot,
            "partySize": self.party_size, "name": self.name, "phone": self.phone,
            "email": self.email, "notes": self.notes, "status": self.status,
            "createdAt": self.created_at, "updatedAt": self.updated_at,
            "startTime": self.start_time, "endTime": self.end_time
        }


class HourlyOccupancy:
    def __init__(self, time_key, occupied_seats, available_seats, reservations=None):
        self.time_key = time_key
        try: self.occupied_seats = int(occupied_seats)
        except (TypeError, ValueError): self.occupied_seats = 0
        try: self.available_seats = int(available_seats)
        except (TypeError, ValueError): self.available_seats = MAX_CAPACITY - self.occupied_seats
        self.reservations = reservations or []

    @property
    def occupancy_rate(self):
        return self.occupied_seats / MAX_CAPACITY * 100

    @property
    def level(self):
        rate = self.occupancy_rate
        if rate >= 100:
            return "full"
        if rate >= 80:
            return "high"
        if rate >= 50:
            return "medium"
        return "low"

    @classmethod
    def from_dict(cls, time_key, data):
        return cls(
            time_key=time_key,
            occupied_seats=data.get('occupiedSeats', 0),
            available_seats=data.get('availableSeats'),
            reservations=data.get('reservations', [])
        )


class DailySummary:
    # Bezugsgröße der Tagesauslastung: 6 Plätze x 10 Stunden
    OCCUPANCY_BASE = MAX_CAPACITY * 10

    def __init__(self, date_str, total_reservations, total_guests, hourly_occupancy=None):
        self.date = date_str
        self.total_reservations = total_reservations
        self.total_guests = total_guests
        self.hourly_occupancy = hourly_occupancy or []

    @property
    def occupancy_percent(self):
        return round(self.total_guests / self.OCCUPANCY_BASE * 100)

    @classmethod
    def from_dict(cls, data):
        hourly = data.get('hourlyOccupancy') or {}
        return cls(
            date_str=data.get('date'),
            total_reservations=int(data.get('totalReservations', 0) or 0),
            total_guests=int(data.get('totalGuests', 0) or 0),
            hourly_occupancy=[HourlyOccupancy.from_dict(k, v) for k, v in hourly.items()]
        )
