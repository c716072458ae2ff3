"""Single-page UI for the contracts dashboard and form."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def contracts_ui() -> HTMLResponse:
    """Contracts table and registration form consuming the JSON API."""
    return HTMLResponse(_UI_HTML)


_UI_HTML = """<!doctype html>
<html lang="pt-BR">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Contratos</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      h1 { margin-bottom: 0.5rem; }
      table { border-collapse: collapse; width: 100%; margin-bottom: 1rem; }
      th, td { border-bottom: 1px solid #ddd; padding: 0.4rem; text-align: left; }
      form { display: grid; grid-template-columns: 1fr 1fr; gap: 0.8rem; max-width: 800px; }
      input, select { padding: 0.4rem 0.6rem; width: 100%; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .full { grid-column: 1 / -1; }
      #errors { color: #b00020; }
    </style>
  </head>
  <body>
    <h1>Contratos</h1>
    <table>
      <thead>
        <tr>
          <th>Código</th><th>Cliente</th><th>Data do Ensaio</th><th>Status</th>
          <th>Local</th><th>Total de Fotos</th><th>Valor</th><th>Pagamento</th>
        </tr>
      </thead>
      <tbody id="rows"></tbody>
    </table>
    <div>
      <button onclick="changePage(-1)">Anterior</button>
      <button onclick="changePage(1)">Próxima</button>
      <select id="pageSize" onchange="page = 0; loadRows()"></select>
      <span id="pageInfo"></span>
    </div>

    <h1>Novo Contrato</h1>
    <form id="contractForm">
      <label>Código do Contrato<input name="contractCode" /></label>
      <label>Nome do Cliente<input name="clientName" /></label>
      <label>Data do Ensaio<input name="sessionDate" type="date" /></label>
      <label>Fotos Contratadas<input name="contractedPhotos" type="number" /></label>
      <label>Fotos Adicionais<input name="additionalPhotos" type="number" value="0" /></label>
      <label>Status do Pedido<select name="status" id="status"></select></label>
      <label>Local do Ensaio<select name="location" id="location"></select></label>
      <div class="full">
        Produtos Extras:
        <label><input name="hasAlbum" type="checkbox" /> Álbum</label>
        <label><input name="hasSignatureBook" type="checkbox" /> Livro de Assinatura</label>
        <label><input name="hasRetrospective" type="checkbox" /> Retrospectiva</label>
      </div>
      <label>Valor do Contrato<input name="contractValue" type="number" step="0.01" /></label>
      <label>Status do Pagamento<select name="paymentStatus" id="paymentStatus"></select></label>
      <div class="full"><button type="submit">Cadastrar Contrato</button></div>
      <pre id="errors" class="full"></pre>
    </form>
    <script>
      let page = 0;

      const COLUMNS = [
        'contractCode', 'clientName', 'sessionDate', 'status',
        'location', 'totalPhotos', 'contractValue', 'paymentStatus'
      ];

      function fillSelect(id, options) {
        const select = document.getElementById(id);
        select.replaceChildren(...options.map(o => {
          const option = document.createElement('option');
          option.value = o.value ?? o;
          option.textContent = o.label ?? o;
          return option;
        }));
      }

      async function loadOptions() {
        const res = await fetch('/options');
        const data = await res.json();
        fillSelect('status', data.status);
        fillSelect('location', data.location);
        fillSelect('paymentStatus', data.paymentStatus);
        fillSelect('pageSize', data.pageSizes);
      }

      async function loadRows() {
        const size = document.getElementById('pageSize').value;
        const res = await fetch(`/dashboard?page=${page}&pageSize=${size}`);
        const data = await res.json();
        document.getElementById('rows').replaceChildren(...data.rows.map(r => {
          const tr = document.createElement('tr');
          for (const column of COLUMNS) {
            const td = document.createElement('td');
            td.textContent = r[column];
            tr.appendChild(td);
          }
          return tr;
        }));
        document.getElementById('pageInfo').textContent =
          `Página ${data.page + 1} de ${Math.max(1, Math.ceil(data.total / data.pageSize))}`;
      }

      function changePage(delta) {
        page = Math.max(0, page + delta);
        loadRows();
      }

      document.getElementById('contractForm').addEventListener('submit', async (event) => {
        event.preventDefault();
        const form = event.target;
        const body = {};
        for (const el of form.elements) {
          if (!el.name) continue;
          if (el.type === 'checkbox') body[el.name] = el.checked;
          else if (el.type === 'number') body[el.name] = el.value === '' ? null : Number(el.value);
          else body[el.name] = el.value;
        }
        const res = await fetch('/contracts', {
          method: 'POST',
          headers: { 'Content-Type': 'application/json' },
          body: JSON.stringify(body)
        });
        const errors = document.getElementById('errors');
        if (!res.ok) {
          errors.textContent = JSON.stringify(await res.json(), null, 2);
          return;
        }
        errors.textContent = '';
        form.reset();
        loadRows();
      });

      loadOptions().then(loadRows);
    </script>
  </body>
</html>
"""
