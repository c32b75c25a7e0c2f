import unittest
from fastapi.testclient import TestClient

from dinner.api.api_run import app
from dinner.events import web_observers
from dinner.tests.data_fixtures import TempDataDirTestCase


class TestRatingsAPI(TempDataDirTestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        web_observers.start()

    def test_add_rating_and_dashboard(self):
        cursor = web_observers.get_events()['next_cursor']
        resp = self.client.post('/api/ratings/add', json={'user': ' Sam ', 'recipe': 'A', 'score': 4})
        self.assertEqual(resp.status_code, 200, resp.text)
        rating = resp.json()['rating']
        self.assertEqual(rating['user'], 'Sam')
        self.assertTrue(rating['date'])

        self.client.post('/api/ratings/add', json={'user': 'Alex', 'recipe': 'A', 'score': 5})
        self.client.post('/api/ratings/add', json={'user': 'Alex', 'recipe': 'B', 'score': 3})

        events = web_observers.get_events(cursor)['events']
        self.assertEqual([e['type'] for e in events], ['rating.added'] * 3)
        self.assertEqual(events[0]['score'], 4)

        data = self.client.get('/api/dashboard', params={'person': 'Alex'}).json()
        self.assertEqual(data['total'], 3)
        self.assertEqual(data['overall'][0], {'recipe': 'A', 'average': 4.5, 'count': 2})
        self.assertEqual([s['recipe'] for s in data['person_favorites']], ['A', 'B'])

    def test_missing_fields_rejected(self):
        resp = self.client.post('/api/ratings/add', json={'user': 'Sam', 'recipe': 'A'})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()['detail'], 'Invalid rating: requires user, recipe, and score')

    def test_score_out_of_range(self):
        resp = self.client.post('/api/ratings/add', json={'user': 'Sam', 'recipe': 'A', 'score': 9})
        self.assertEqual(resp.status_code, 400)
        self.assertFalse((self.data_dir / 'ratings.json').exists())

    def test_replace_ratings(self):
        ratings = [{'user': 'Sam', 'recipe': 'C', 'score': 2, 'date': '2025-01-01T00:00:00.000Z'}]
        resp = self.client.post('/api/ratings', json={'ratings': ratings})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get('/api/ratings').json()['ratings'], ratings)

    def test_replace_ratings_requires_array(self):
        resp = self.client.post('/api/ratings', json={'ratings': {}})
        self.assertEqual(resp.status_code, 400)


if __name__ == '__main__':
    unittest.main()
